"""Data models for Tile Pairing."""

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

from tilepairing.models.pairing import (
    GameResult,
    Pairing,
    PairingRecord,
    TeamMatchup,
    TeamPairingResult,
    as_records,
)
from tilepairing.models.pairing_history import PairingHistory
from tilepairing.models.player import Player, PlayerStanding
from tilepairing.models.team import TeamStanding
from tilepairing.models.tournament_config import ClinchThresholds, TournamentConfig

__all__ = [
    "Player",
    "PlayerStanding",
    "Pairing",
    "PairingRecord",
    "GameResult",
    "PairingHistory",
    "TeamMatchup",
    "TeamPairingResult",
    "TeamStanding",
    "ClinchThresholds",
    "TournamentConfig",
    "as_records",
]
