"""Fonte-Swiss pairing: top half against bottom half within score groups."""

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
from typing import Dict, List

from tilepairing.constants import FORMAT_FONTE_SWISS
from tilepairing.models import PlayerStanding
from tilepairing.pairing.base import PairingStrategy, TableAllocator
from tilepairing.utils import setup_logger

logger = setup_logger(__name__)


def group_by_score(standings: List[PlayerStanding]) -> Dict[int, List[PlayerStanding]]:
    """Bucket standings by whole points, keeping standings order in each."""
    groups: Dict[int, List[PlayerStanding]] = {}
    for standing in standings:
        groups.setdefault(int(standing.points), []).append(standing)
    return groups


class FonteSwissPairing(PairingStrategy):
    """Pair the top half of each score group against its bottom half.

    Score groups use whole points, so a draw does not move a player into a
    group of its own. Within a group players are ordered by spread, then
    rating. Gibsonized players in the top half meet Gibsonized players in
    the bottom half before everybody else is paired across the halves.
    """

    name = FORMAT_FONTE_SWISS

    def pair_standings(
        self, standings: List[PlayerStanding], tables: TableAllocator
    ) -> None:
        carried: List[PlayerStanding] = []
        groups = group_by_score(standings)
        for score in sorted(groups, reverse=True):
            group = sorted(
                groups[score], key=lambda s: (s.spread, s.rating), reverse=True
            )
            carried += self._pair_group(group, tables)

        if carried:
            logger.debug(
                "Pairing %d player(s) left over from odd score groups", len(carried)
            )
        self.pair_leftovers(carried, tables)

    def _pair_group(
        self, group: List[PlayerStanding], tables: TableAllocator
    ) -> List[PlayerStanding]:
        """Pair one score group.

        Returns:
            The player left over when the group is odd
        """
        half = math.ceil(len(group) / 2)
        top, bottom = group[:half], group[half:]

        clinched_top, clinched_bottom = self.pair_across(
            [s for s in top if s.is_clinched],
            [s for s in bottom if s.is_clinched],
            tables,
        )
        remaining_top = clinched_top + [s for s in top if not s.is_clinched]
        remaining_bottom = clinched_bottom + [s for s in bottom if not s.is_clinched]
        remaining_top, remaining_bottom = self.pair_across(
            remaining_top, remaining_bottom, tables
        )

        unpaired = remaining_top + remaining_bottom
        while len(unpaired) >= 2:
            tables.seat(unpaired.pop(0), unpaired.pop(0))
        return unpaired
