"""Quartile pairing: first quartile against second, third against fourth."""

# Tile Pairing
# Copyright (C) 2025  Tile Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import math
from typing import List

from tilepairing.constants import FORMAT_QUARTILE
from tilepairing.models import PlayerStanding
from tilepairing.pairing.base import PairingStrategy, TableAllocator


def split_quartiles(standings: List[PlayerStanding]) -> List[List[PlayerStanding]]:
    """Split ranked standings into four contiguous quartiles.

    The first three hold ``ceil(n / 4)`` players each and the fourth holds
    the remainder, so trailing quartiles may be short or empty.
    """
    size = math.ceil(len(standings) / 4)
    return [
        standings[:size],
        standings[size : size * 2],
        standings[size * 2 : size * 3],
        standings[size * 3 :],
    ]


class QuartilePairing(PairingStrategy):
    """Pair within neighbouring quartiles of the standings.

    Quartiles are cut from the full standings before Gibsonized players are
    taken out and paired, so clinching does not shift the quartile borders.
    """

    name = FORMAT_QUARTILE

    def pair_standings(
        self, standings: List[PlayerStanding], tables: TableAllocator
    ) -> None:
        quartiles = split_quartiles(standings)

        _, leftover = self.pair_clinched(standings, tables)
        taken = {pid for p in tables.pairings for pid in p.player_ids}
        taken.update(s.id for s in leftover)
        first, second, third, fourth = (
            [s for s in quartile if s.id not in taken] for quartile in quartiles
        )

        first, second = self.pair_across(first, second, tables)
        third, fourth = self.pair_across(third, fourth, tables)

        self.pair_leftovers(leftover + first + second + third + fourth, tables)
