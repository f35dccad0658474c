"""Data model for match history."""

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
from typing import Any, Dict, Iterable, Set

from tilepairing.models.pairing import PairingRecord
from tilepairing.type_hints import Matchup


@dataclass
class PairingHistory:
    """
    Tracks historical pairings to avoid rematches.

    History is never score-aware: it only records that two players met.
    BYE pairings are not meetings and are not recorded.

    Attributes
    ----------
    previous_matches : set of frozenset of str
        Set containing frozensets of player ID pairs representing
        games that have already been paired.
    """

    previous_matches: Set[Matchup] = field(default_factory=set)

    def add_pairing(self, player1_id: str, player2_id: str) -> None:
        """Record that two players have been paired."""
        self.previous_matches.add(frozenset({player1_id, player2_id}))

    def have_played(self, player1_id: str, player2_id: str) -> bool:
        """Check if two players have previously played each other."""
        return frozenset({player1_id, player2_id}) in self.previous_matches

    def __len__(self) -> int:
        return len(self.previous_matches)

    @classmethod
    def from_records(cls, records: Iterable[PairingRecord]) -> "PairingHistory":
        """Build history from stored pairings, skipping BYE pairings."""
        history = cls()
        for record in records:
            if not record.is_bye:
                history.add_pairing(record.player1_id, record.player2_id)
        return history

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing history to dictionary."""
        return {
            "previous_matches": sorted(sorted(pair) for pair in self.previous_matches),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingHistory":
        """Deserialize pairing history from dictionary."""
        return cls(
            previous_matches=set(
                frozenset(map(str, pair)) for pair in data.get("previous_matches", [])
            ),
        )
