"""TournamentConfig data class."""

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

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional

from dateutil import parser as date_parser

from tilepairing.constants import (
    DEFAULT_FIRST_PLACE_FRACTION,
    DEFAULT_FORMAT,
    DEFAULT_NUM_ROUNDS,
    DEFAULT_PODIUM_FRACTION,
    FORMAT_DESCRIPTIONS,
)
from tilepairing.exceptions import InvalidConfigurationException
from tilepairing.utils.validation import (
    validate_flag,
    validate_fraction,
    validate_positive_integer,
)


@dataclass(frozen=True)
class ClinchThresholds:
    """Shares of the field that define the two Gibsonization tiers.

    Attributes
    ----------
    first_place_fraction : float
        Share of the field treated as contending for first place.
    podium_fraction : float
        Share of the field treated as contending for the podium.
    """

    first_place_fraction: float = DEFAULT_FIRST_PLACE_FRACTION
    podium_fraction: float = DEFAULT_PODIUM_FRACTION

    def first_place_cutoff(self, field_size: int) -> int:
        return math.ceil(field_size * self.first_place_fraction)

    def podium_cutoff(self, field_size: int) -> int:
        return math.ceil(field_size * self.podium_fraction)


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    num_rounds : int
        Number of rounds in the tournament.
    pairing_system : str
        Pairing format tag. Supported values are "swiss", "fonte-swiss",
        "king-of-hill", "round-robin", "quartile" and "manual".
    avoid_rematches : bool
        Whether pairing scans for opponents not met before.
    clinch_thresholds : ClinchThresholds
        Field shares used by Gibsonization.
    team_mode : bool
        Whether rounds are scheduled team against team.
    event_date : datetime.date, optional
        Day the event is held.
    venue : str, optional
        Where the event is held.
    """

    name: str
    num_rounds: int = DEFAULT_NUM_ROUNDS
    pairing_system: str = DEFAULT_FORMAT
    avoid_rematches: bool = True
    clinch_thresholds: ClinchThresholds = field(default_factory=ClinchThresholds)
    team_mode: bool = False
    event_date: Optional[date] = None
    venue: Optional[str] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check the configuration, raising on the first problem found.

        Numeric strings such as ``"7"`` or ``"0.25"`` are accepted and
        stored as numbers.

        Raises:
            InvalidConfigurationException: If any setting is out of range or
                of the wrong type
        """
        result = validate_positive_integer(self.num_rounds, "Number of rounds")
        if not result:
            raise InvalidConfigurationException(result.error_message)
        self.num_rounds = int(result.sanitized_value)

        if self.pairing_system not in FORMAT_DESCRIPTIONS:
            raise InvalidConfigurationException(
                f"Unknown pairing system: {self.pairing_system!r}"
            )

        for value, label in (
            (self.avoid_rematches, "Avoid rematches"),
            (self.team_mode, "Team mode"),
        ):
            result = validate_flag(value, label)
            if not result:
                raise InvalidConfigurationException(result.error_message)

        fractions = []
        for value, label in (
            (self.clinch_thresholds.first_place_fraction, "First place fraction"),
            (self.clinch_thresholds.podium_fraction, "Podium fraction"),
        ):
            result = validate_fraction(value, label)
            if not result:
                raise InvalidConfigurationException(result.error_message)
            fractions.append(float(result.sanitized_value))
        thresholds = self.clinch_thresholds = ClinchThresholds(*fractions)

        if thresholds.podium_fraction < thresholds.first_place_fraction:
            raise InvalidConfigurationException(
                "Podium fraction must not be smaller than first place fraction"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "num_rounds": self.num_rounds,
            "pairing_system": self.pairing_system,
            "avoid_rematches": self.avoid_rematches,
            "first_place_fraction": self.clinch_thresholds.first_place_fraction,
            "podium_fraction": self.clinch_thresholds.podium_fraction,
            "team_mode": self.team_mode,
            "date": self.event_date.isoformat() if self.event_date else None,
            "venue": self.venue,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary.

        Raises:
            InvalidConfigurationException: If the date cannot be parsed or a
                setting is out of range
        """
        event_date = data.get("date")
        if isinstance(event_date, str) and event_date.strip():
            try:
                event_date = date_parser.isoparse(event_date).date()
            except ValueError as e:
                raise InvalidConfigurationException(
                    f"Invalid tournament date {event_date!r}: {e}"
                ) from e
        elif not isinstance(event_date, date):
            event_date = None

        return cls(
            name=data.get("name", "Untitled Tournament"),
            num_rounds=data.get("num_rounds", DEFAULT_NUM_ROUNDS),
            pairing_system=data.get("pairing_system", DEFAULT_FORMAT),
            avoid_rematches=data.get("avoid_rematches", True),
            clinch_thresholds=ClinchThresholds(
                first_place_fraction=data.get(
                    "first_place_fraction", DEFAULT_FIRST_PLACE_FRACTION
                ),
                podium_fraction=data.get("podium_fraction", DEFAULT_PODIUM_FRACTION),
            ),
            team_mode=data.get("team_mode", False),
            event_date=event_date,
            venue=data.get("venue"),
        )
