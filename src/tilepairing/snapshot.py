"""Tournament snapshots read by the command-line tool.

A snapshot is a single JSON document holding everything the engine needs
to pair the next round::

    {
      "config": {"name": "...", "num_rounds": 7, ...},
      "players": [{"id": "p1", "name": "...", "rating": 1500}, ...],
      "pairings": [{"id": "r1t1", "player1_id": "p1", ...}, ...],
      "results": [{"pairing_id": "r1t1", "player1_score": 412, ...}, ...]
    }
"""

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

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from tilepairing.exceptions import FileLoadException
from tilepairing.models import GameResult, PairingRecord, Player, TournamentConfig
from tilepairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class TournamentSnapshot:
    """Players and history of a tournament at one point in time."""

    config: TournamentConfig
    players: List[Player] = field(default_factory=list)
    pairings: List[PairingRecord] = field(default_factory=list)
    results: List[GameResult] = field(default_factory=list)

    @property
    def last_round(self) -> int:
        """Highest round number found in the pairing history, 0 if none."""
        rounds = [p.round_number for p in self.pairings if p.round_number]
        return max(rounds, default=0)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize snapshot to dictionary."""
        return {
            "config": self.config.to_dict(),
            "players": [p.to_dict() for p in self.players],
            "pairings": [p.to_dict() for p in self.pairings],
            "results": [r.to_dict() for r in self.results],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentSnapshot":
        """Deserialize snapshot from dictionary."""
        return cls(
            config=TournamentConfig.from_dict(data.get("config") or {}),
            players=[Player.from_dict(p) for p in data.get("players", [])],
            pairings=[PairingRecord.from_dict(p) for p in data.get("pairings", [])],
            results=[GameResult.from_dict(r) for r in data.get("results", [])],
        )


def load_snapshot(path: Union[str, Path]) -> TournamentSnapshot:
    """Load a snapshot from a JSON file.

    Raises:
        FileLoadException: If the file is missing, is not valid JSON, or
            lacks required fields
    """
    snapshot_path = Path(path)
    try:
        with open(snapshot_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise FileLoadException(f"Cannot read snapshot {snapshot_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise FileLoadException(f"Snapshot {snapshot_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise FileLoadException(f"Snapshot {snapshot_path} must be a JSON object")

    try:
        snapshot = TournamentSnapshot.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise FileLoadException(f"Malformed snapshot {snapshot_path}: {e}") from e

    logger.info(
        "Loaded snapshot %s: %d players, %d pairings, %d results",
        snapshot_path,
        len(snapshot.players),
        len(snapshot.pairings),
        len(snapshot.results),
    )
    return snapshot
