"""Manual pairing."""

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

from typing import List

from tilepairing.constants import FORMAT_MANUAL
from tilepairing.models import PlayerStanding
from tilepairing.pairing.base import PairingStrategy, TableAllocator


class ManualPairing(PairingStrategy):
    """Produce no pairings; the director seats players by hand."""

    name = FORMAT_MANUAL

    def pair_standings(
        self, standings: List[PlayerStanding], tables: TableAllocator
    ) -> None:
        return None
