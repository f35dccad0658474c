"""Entry points of the pairing engine.

:func:`generate_pairings` computes standings, annotates clinches and runs
the chosen format. :func:`generate_team_round_robin_pairings` schedules a
team round.
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

from dataclasses import replace
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Type, Union

from tilepairing.constants import (
    FORMAT_FONTE_SWISS,
    FORMAT_KING_OF_HILL,
    FORMAT_MANUAL,
    FORMAT_QUARTILE,
    FORMAT_ROUND_ROBIN,
    FORMAT_SWISS,
)
from tilepairing.exceptions import InvalidFormatException
from tilepairing.models import (
    ClinchThresholds,
    GameResult,
    Pairing,
    PairingHistory,
    PairingRecord,
    Player,
    PlayerStanding,
    TournamentConfig,
    as_records,
)
from tilepairing.pairing.base import PairingStrategy
from tilepairing.pairing.fonte_swiss import FonteSwissPairing
from tilepairing.pairing.king_of_the_hill import KingOfTheHillPairing
from tilepairing.pairing.manual import ManualPairing
from tilepairing.pairing.quartile import QuartilePairing
from tilepairing.pairing.round_robin import RoundRobinPairing
from tilepairing.pairing.swiss import SwissPairing
from tilepairing.pairing.team_round_robin import generate_team_round_robin_pairings
from tilepairing.tournament import ClinchDetector, calculate_standings, rank_standings
from tilepairing.utils import setup_logger

logger = setup_logger(__name__)


class PairingFormat(str, Enum):
    """Supported pairing formats."""

    SWISS = FORMAT_SWISS
    FONTE_SWISS = FORMAT_FONTE_SWISS
    KING_OF_HILL = FORMAT_KING_OF_HILL
    ROUND_ROBIN = FORMAT_ROUND_ROBIN
    QUARTILE = FORMAT_QUARTILE
    MANUAL = FORMAT_MANUAL

    @classmethod
    def parse(cls, value: Union[str, "PairingFormat"]) -> "PairingFormat":
        """Look up a format by tag.

        Raises:
            InvalidFormatException: If the tag names no known format
        """
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(f.value for f in cls)
            raise InvalidFormatException(
                f"Unknown pairing format '{value}' (expected one of: {known})"
            ) from None


STRATEGIES: Dict[PairingFormat, Type[PairingStrategy]] = {
    PairingFormat.SWISS: SwissPairing,
    PairingFormat.FONTE_SWISS: FonteSwissPairing,
    PairingFormat.KING_OF_HILL: KingOfTheHillPairing,
    PairingFormat.ROUND_ROBIN: RoundRobinPairing,
    PairingFormat.QUARTILE: QuartilePairing,
    PairingFormat.MANUAL: ManualPairing,
}


def create_strategy(
    pairing_format: Union[str, PairingFormat],
    avoid_rematches: bool = True,
    history: Optional[PairingHistory] = None,
) -> PairingStrategy:
    """Instantiate the strategy for a format tag."""
    strategy_class = STRATEGIES[PairingFormat.parse(pairing_format)]
    return strategy_class(avoid_rematches=avoid_rematches, history=history)


def prepare_standings(
    players: Sequence[Union[Player, PlayerStanding]],
    previous_pairings: Sequence[PairingRecord],
    results: Iterable[GameResult],
    current_round: int,
    total_rounds: int,
    thresholds: ClinchThresholds = ClinchThresholds(),
) -> List[PlayerStanding]:
    """Turn the caller's players into ranked, clinch-annotated standings.

    Plain players get standings computed from the results. Precomputed
    standings are copied, never modified, and re-ranked.
    """
    if all(isinstance(p, PlayerStanding) for p in players):
        standings = [replace(p, is_clinched=False) for p in players]
    else:
        registered = [p.player if isinstance(p, PlayerStanding) else p for p in players]
        standings = calculate_standings(registered, previous_pairings, results)

    annotated = ClinchDetector(thresholds).annotate(
        standings, current_round, total_rounds
    )
    return rank_standings(annotated)


def generate_pairings(
    players: Sequence[Union[Player, PlayerStanding]],
    pairing_format: Union[str, PairingFormat],
    avoid_rematches: bool,
    previous_pairings: Iterable[Union[Pairing, PairingRecord]],
    current_round: int,
    total_rounds: int,
    results: Iterable[GameResult] = (),
    config: Optional[TournamentConfig] = None,
) -> List[Pairing]:
    """Compute the pairings of the next round.

    Args:
        players: Registered players, or standings already computed by the
            caller
        pairing_format: Format tag, see :class:`PairingFormat`
        avoid_rematches: Skip opponents already met where possible
        previous_pairings: Every pairing of earlier rounds
        current_round: Round being paired, 1-indexed
        total_rounds: Rounds in the tournament
        results: Recorded results, used when ``players`` are plain players
        config: Tournament settings; only the clinch thresholds are read

    Returns:
        Pairings in table order covering every player exactly once, plus a
        BYE when the field is odd. Manual format gives an empty list.

    Raises:
        InvalidFormatException: If ``pairing_format`` is unknown
    """
    pairing_format = PairingFormat.parse(pairing_format)
    records = as_records(previous_pairings)
    thresholds = config.clinch_thresholds if config else ClinchThresholds()

    logger.info(
        "Generating round %d/%d pairings for %d players using %s",
        current_round,
        total_rounds,
        len(players),
        pairing_format.value,
    )

    standings = prepare_standings(
        players, records, results, current_round, total_rounds, thresholds
    )
    strategy = create_strategy(
        pairing_format,
        avoid_rematches=avoid_rematches,
        history=PairingHistory.from_records(records),
    )
    pairings = strategy.pair(standings, round_number=current_round)

    logger.info("Generated %d pairings for round %d", len(pairings), current_round)
    return pairings


__all__ = [
    "PairingFormat",
    "STRATEGIES",
    "create_strategy",
    "prepare_standings",
    "generate_pairings",
    "generate_team_round_robin_pairings",
]
