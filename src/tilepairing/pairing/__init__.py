"""Pairing formats and the engine that drives them."""

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

from tilepairing.pairing.base import PairingStrategy, TableAllocator
from tilepairing.pairing.engine import (
    PairingFormat,
    create_strategy,
    generate_pairings,
    generate_team_round_robin_pairings,
)
from tilepairing.pairing.first_move import determine_first_move
from tilepairing.pairing.team_round_robin import (
    TeamRoundRobin,
    build_round_robin_schedule,
)

__all__ = [
    "PairingStrategy",
    "TableAllocator",
    "PairingFormat",
    "create_strategy",
    "generate_pairings",
    "generate_team_round_robin_pairings",
    "determine_first_move",
    "TeamRoundRobin",
    "build_round_robin_schedule",
]
