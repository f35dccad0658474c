"""Pairing engine for Scrabble tournaments."""

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

from tilepairing.exceptions import TilePairingException
from tilepairing.models import (
    GameResult,
    Pairing,
    PairingRecord,
    Player,
    PlayerStanding,
    TeamPairingResult,
    TournamentConfig,
)
from tilepairing.pairing import (
    PairingFormat,
    generate_pairings,
    generate_team_round_robin_pairings,
)

__version__ = "0.1.0"

__all__ = [
    "generate_pairings",
    "generate_team_round_robin_pairings",
    "PairingFormat",
    "Player",
    "PlayerStanding",
    "Pairing",
    "PairingRecord",
    "GameResult",
    "TeamPairingResult",
    "TournamentConfig",
    "TilePairingException",
]
