"""Team standing data class."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from tilepairing.models.player import Player


@dataclass
class TeamStanding:
    """Aggregated results of one team.

    Attributes:
        team_name: Team name, which is also its identity
        matches_won: Head-to-head encounters in which the team won more games
        matches_lost: Encounters in which the opponents won more games
        matches_drawn: Encounters with equal games won
        total_games_won: Individual games won by members
        total_games_lost: Individual games lost by members
        total_spread: Summed spread of members
        players: Team roster
        rank: 1-based team rank
    """

    team_name: str
    matches_won: int = 0
    matches_lost: int = 0
    matches_drawn: int = 0
    total_games_won: int = 0
    total_games_lost: int = 0
    total_spread: float = 0
    players: List[Player] = field(default_factory=list)
    rank: int = 0

    def sort_key(self) -> Tuple[int, float, int]:
        """Key for descending order: matches won, spread, games won."""
        return (self.matches_won, self.total_spread, self.total_games_won)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team standing to dictionary."""
        return {
            "team_name": self.team_name,
            "matches_won": self.matches_won,
            "matches_lost": self.matches_lost,
            "matches_drawn": self.matches_drawn,
            "total_games_won": self.total_games_won,
            "total_games_lost": self.total_games_lost,
            "total_spread": self.total_spread,
            "players": [p.to_dict() for p in self.players],
            "rank": self.rank,
        }
