"""Parse pasted player rosters.

Each non-empty line describes one player in one of these shapes::

    Name, Rating
    Name, Team, Rating
    Name Rating

Lines are validated independently; bad lines are reported rather than
raised so a director can fix them all in one pass.
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

from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from tilepairing.exceptions import RosterParseException
from tilepairing.models import Player
from tilepairing.utils import setup_logger
from tilepairing.utils.validation import (
    validate_name,
    validate_rating,
    validate_rating_strict,
)

logger = setup_logger(__name__)

DUPLICATE_NAME_ERROR = "Duplicate name"


@dataclass
class ParsedPlayer:
    """One roster line after parsing.

    Attributes:
        name: Player name as typed, stripped
        rating: Parsed rating, 0 when invalid
        team_name: Team from the three-field comma form
        is_valid: Whether the line can become a player
        error: Why the line was rejected
    """

    name: str
    rating: int = 0
    team_name: Optional[str] = None
    is_valid: bool = True
    error: Optional[str] = None


def _split_line(line: str) -> Tuple[str, Optional[str], str]:
    """Split a line into (name, team, rating text)."""
    if "," in line:
        parts = [part.strip() for part in line.split(",")]
        team = parts[1] if len(parts) >= 3 and parts[1] else None
        return parts[0], team, parts[-1]

    name, _, rating = line.rpartition(" ")
    if not name:
        # a single word is read as a name without rating
        return line, None, ""
    return name.strip(), None, rating.strip()


def parse_player_input(text: str) -> List[ParsedPlayer]:
    """Parse a pasted roster, one player per line.

    Names are compared case-insensitively; the second and later
    occurrences of a name are rejected as duplicates.
    """
    parsed: List[ParsedPlayer] = []
    seen: Set[str] = set()

    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        name, team, rating_text = _split_line(line)

        name_check = validate_name(name)
        if not name_check:
            parsed.append(
                ParsedPlayer(name="", is_valid=False, error=name_check.error_message)
            )
            continue

        if name.lower() in seen:
            parsed.append(
                ParsedPlayer(name=name, is_valid=False, error=DUPLICATE_NAME_ERROR)
            )
            continue

        rating_check = validate_rating(rating_text)
        if not rating_check:
            parsed.append(
                ParsedPlayer(
                    name=name,
                    team_name=team,
                    is_valid=False,
                    error=rating_check.error_message,
                )
            )
            continue

        seen.add(name.lower())
        parsed.append(
            ParsedPlayer(
                name=name,
                rating=int(rating_check.sanitized_value),
                team_name=team,
            )
        )

    invalid = sum(1 for p in parsed if not p.is_valid)
    logger.debug("Parsed %d roster lines, %d invalid", len(parsed), invalid)
    return parsed


def build_players(parsed: Iterable[ParsedPlayer]) -> List[Player]:
    """Register the valid entries of a parsed roster.

    Ids are assigned in order as ``p1``, ``p2``, ..., so the same roster
    always yields the same players.

    Raises:
        RosterParseException: If no entry is valid
    """
    players = []
    for entry in parsed:
        if not entry.is_valid:
            continue
        players.append(
            Player(
                id=f"p{len(players) + 1}",
                name=entry.name,
                rating=validate_rating_strict(entry.rating),
                team_name=entry.team_name,
            )
        )
    if not players:
        raise RosterParseException("Roster contains no valid players")
    return players
