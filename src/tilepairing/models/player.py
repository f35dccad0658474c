"""Player and derived standing data classes."""

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

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from tilepairing.constants import BYE_PLAYER_ID, BYE_PLAYER_NAME, DRAW_POINTS, WIN_POINTS
from tilepairing.type_hints import StandingKey
from tilepairing.utils.validation import validate_rating_strict


def _parse_rating(value: Any) -> int:
    """Read a stored rating; a missing one is 0.

    Raises:
        RatingValidationException: If the rating is fractional or out of range
    """
    if value is None:
        return 0
    return validate_rating_strict(value)


@dataclass(frozen=True)
class Player:
    """A registered tournament player.

    Identity, rating and team are fixed at registration; the pairing engine
    never mutates them.

    Attributes
    ----------
    id : str
        Opaque unique identifier.
    name : str
        Display name.
    rating : int
        Skill rating, used as the last standings tie-break.
    team_name : str, optional
        Team affiliation in team mode.
    """

    id: str
    name: str
    rating: int = 0
    team_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "team_name": self.team_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(
            id=str(data["id"]),
            name=data["name"],
            rating=_parse_rating(data.get("rating")),
            team_name=data.get("team_name") or None,
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.rating})"


@dataclass
class PlayerStanding:
    """A player's standing, derived from results.

    Standings are an ephemeral view over a Player and the result history.
    They are rebuilt every time pairings are generated and never persisted.

    Attributes
    ----------
    player : Player
        The underlying registration.
    wins, losses, draws : int
        Game outcome counts.
    spread : float
        Cumulative score differential (own score minus opponent score).
    rank : int
        1-based standings rank, 0 until ranked.
    previous_starts : int
        Number of earlier games in which this player moved first.
    is_clinched : bool
        Whether the player's placement tier is already guaranteed.
    """

    player: Player
    wins: int = 0
    losses: int = 0
    draws: int = 0
    spread: float = 0
    rank: int = 0
    previous_starts: int = 0
    is_clinched: bool = False

    @property
    def id(self) -> str:
        return self.player.id

    @property
    def name(self) -> str:
        return self.player.name

    @property
    def rating(self) -> int:
        return self.player.rating

    @property
    def team_name(self) -> Optional[str]:
        return self.player.team_name

    @property
    def points(self) -> float:
        """Standings points: one per win, half per draw."""
        return self.wins * WIN_POINTS + self.draws * DRAW_POINTS

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def is_bye(self) -> bool:
        return self.player.id == BYE_PLAYER_ID

    def sort_key(self) -> StandingKey:
        """Key for descending standings order: points, spread, rating."""
        return (self.points, self.spread, self.rating)

    @classmethod
    def bye(cls) -> "PlayerStanding":
        """Synthetic opponent for the odd player out."""
        return cls(player=Player(id=BYE_PLAYER_ID, name=BYE_PLAYER_NAME))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing to a flat dictionary."""
        data = self.player.to_dict()
        data.update(
            {
                "wins": self.wins,
                "losses": self.losses,
                "draws": self.draws,
                "points": self.points,
                "spread": self.spread,
                "rank": self.rank,
                "previous_starts": self.previous_starts,
                "is_clinched": self.is_clinched,
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerStanding":
        """Deserialize a flat standing dictionary.

        ``points`` is derived, so it is ignored when present.
        """
        return cls(
            player=Player.from_dict(data),
            wins=int(data.get("wins", 0)),
            losses=int(data.get("losses", 0)),
            draws=int(data.get("draws", 0)),
            spread=data.get("spread", 0),
            rank=int(data.get("rank", 0)),
            previous_starts=int(data.get("previous_starts", 0)),
            is_clinched=bool(data.get("is_clinched", False)),
        )

    def __str__(self) -> str:
        return f"#{self.rank} {self.name} {self.points}pts ({self.wins}-{self.losses}-{self.draws}) {self.spread:+}"
