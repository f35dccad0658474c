"""King-of-the-Hill pairing: highest ranked against lowest ranked."""

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

from tilepairing.constants import FORMAT_KING_OF_HILL
from tilepairing.models import PlayerStanding
from tilepairing.pairing.base import PairingStrategy, TableAllocator


class KingOfTheHillPairing(PairingStrategy):
    """Fold the standings: first meets last, second meets second-to-last.

    When rematch avoidance is on and a fold partner has already been met,
    the first unplayed partner further down the folded bottom half is
    swapped into place.
    """

    name = FORMAT_KING_OF_HILL

    def pair_standings(
        self, standings: List[PlayerStanding], tables: TableAllocator
    ) -> None:
        contenders, leftover = self.pair_clinched(standings, tables)

        half = math.ceil(len(contenders) / 2)
        top = contenders[:half]
        bottom = contenders[half:][::-1]

        for index, player1 in enumerate(top):
            if index >= len(bottom):
                leftover.append(player1)
                continue
            if self.avoid_rematches and self.history.have_played(
                player1.id, bottom[index].id
            ):
                self._swap_in_unplayed(player1, bottom, index)
            tables.seat(player1, bottom[index])

        self.pair_leftovers(leftover, tables)

    def _swap_in_unplayed(
        self, player: PlayerStanding, bottom: List[PlayerStanding], index: int
    ) -> None:
        # Only later positions are still free
        for alternative in range(index + 1, len(bottom)):
            if not self.history.have_played(player.id, bottom[alternative].id):
                bottom[index], bottom[alternative] = bottom[alternative], bottom[index]
                return
