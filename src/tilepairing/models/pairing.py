"""Pairing, result and team matchup data classes."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from tilepairing.constants import BYE_PLAYER_ID
from tilepairing.models.player import PlayerStanding


@dataclass(frozen=True)
class PairingRecord:
    """A pairing as stored by the surrounding application.

    This is the shape the engine reads history from: who met whom, and who
    moved first.
    """

    player1_id: str
    player2_id: str
    first_move_player_id: Optional[str] = None
    round_number: Optional[int] = None
    table_number: Optional[int] = None
    id: Optional[str] = None

    @property
    def is_bye(self) -> bool:
        return BYE_PLAYER_ID in (self.player1_id, self.player2_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing record to dictionary."""
        return {
            "id": self.id,
            "round_number": self.round_number,
            "table_number": self.table_number,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "first_move_player_id": self.first_move_player_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingRecord":
        """Deserialize pairing record from dictionary."""
        return cls(
            player1_id=str(data["player1_id"]),
            player2_id=str(data["player2_id"]),
            first_move_player_id=data.get("first_move_player_id"),
            round_number=data.get("round_number"),
            table_number=data.get("table_number"),
            id=data.get("id"),
        )


@dataclass
class Pairing:
    """One table of a generated round.

    The clinched flags are carried through for display only; they play no
    further part in pairing once computed.
    """

    table_number: int
    player1: PlayerStanding
    player2: PlayerStanding
    first_move_player_id: str
    player1_clinched: bool = False
    player2_clinched: bool = False
    round_number: Optional[int] = None

    @property
    def is_bye(self) -> bool:
        return self.player1.is_bye or self.player2.is_bye

    @property
    def player_ids(self) -> Tuple[str, str]:
        return (self.player1.id, self.player2.id)

    def to_record(self, pairing_id: Optional[str] = None) -> PairingRecord:
        """Convert to the stored shape, for feeding back in as history."""
        return PairingRecord(
            player1_id=self.player1.id,
            player2_id=self.player2.id,
            first_move_player_id=self.first_move_player_id,
            round_number=self.round_number,
            table_number=self.table_number,
            id=pairing_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "table_number": self.table_number,
            "round_number": self.round_number,
            "player1": self.player1.to_dict(),
            "player2": self.player2.to_dict(),
            "first_move_player_id": self.first_move_player_id,
            "player1_clinched": self.player1_clinched,
            "player2_clinched": self.player2_clinched,
        }


@dataclass(frozen=True)
class GameResult:
    """Final scores of one game, keyed by the pairing it resolves."""

    pairing_id: str
    player1_score: float
    player2_score: float

    def scores_for(
        self, pairing: PairingRecord, player_id: str
    ) -> Optional[Tuple[float, float]]:
        """Return (own_score, opponent_score) for a player in this game.

        Returns None when the player did not take part.
        """
        if pairing.player1_id == player_id:
            return self.player1_score, self.player2_score
        if pairing.player2_id == player_id:
            return self.player2_score, self.player1_score
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "pairing_id": self.pairing_id,
            "player1_score": self.player1_score,
            "player2_score": self.player2_score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameResult":
        """Deserialize result from dictionary."""
        return cls(
            pairing_id=str(data["pairing_id"]),
            player1_score=data["player1_score"],
            player2_score=data["player2_score"],
        )


@dataclass
class TeamMatchup:
    """Two teams meeting in a round, with the tables their games occupy."""

    team1: str
    team2: str
    tables: List[int] = field(default_factory=list)

    @property
    def teams(self) -> frozenset:
        return frozenset({self.team1, self.team2})

    def to_dict(self) -> Dict[str, Any]:
        """Serialize matchup to dictionary."""
        return {"team1": self.team1, "team2": self.team2, "tables": list(self.tables)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamMatchup":
        """Deserialize matchup from dictionary."""
        return cls(
            team1=data["team1"],
            team2=data["team2"],
            tables=list(data.get("tables", [])),
        )


@dataclass
class TeamPairingResult:
    """Individual pairings for one team round, grouped by matchup."""

    pairings: List[Pairing]
    team_matchups: List[TeamMatchup]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team round to dictionary."""
        return {
            "pairings": [p.to_dict() for p in self.pairings],
            "team_matchups": [m.to_dict() for m in self.team_matchups],
        }


def as_records(pairings: Iterable[Union[Pairing, PairingRecord]]) -> List[PairingRecord]:
    """Normalize history that may mix generated and stored pairings."""
    return [p.to_record() if isinstance(p, Pairing) else p for p in pairings]


#  LocalWords:  PairingRecord TeamMatchup
