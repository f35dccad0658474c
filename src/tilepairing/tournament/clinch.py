"""Gibsonization (clinch) detection.

A player is Gibsonized once no competitor outside their placement tier can
catch them, even by winning every remaining game. Gibsonized players are
paired among themselves so that their games do not decide standings battles
they are no longer part of.
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
from typing import List, Sequence

from tilepairing.models import ClinchThresholds, PlayerStanding
from tilepairing.tournament.standings import sort_standings
from tilepairing.utils import setup_logger

logger = setup_logger(__name__)


def remaining_rounds(current_round: int, total_rounds: int) -> int:
    """Rounds still to be played, counting the one being paired."""
    return total_rounds - current_round + 1


class ClinchDetector:
    """Flags players whose placement tier is mathematically decided.

    Two tiers are tested in order: first place, covering the top
    ``first_place_fraction`` of the field, and the podium, covering the top
    ``podium_fraction``. A player inside a tier is clinched when their
    current points are strictly greater than the best total any player
    below the tier could still reach.
    """

    def __init__(self, thresholds: ClinchThresholds = ClinchThresholds()):
        self.thresholds = thresholds

    def annotate(
        self,
        standings: Sequence[PlayerStanding],
        current_round: int,
        total_rounds: int,
    ) -> List[PlayerStanding]:
        """Return copies of the standings with ``is_clinched`` recomputed.

        Input order is preserved and the inputs are left untouched.

        Args:
            standings: Standings of the whole field
            current_round: Round being paired (1-indexed)
            total_rounds: Rounds in the tournament
        """
        remaining = remaining_rounds(current_round, total_rounds)
        field_size = len(standings)
        first_cutoff = self.thresholds.first_place_cutoff(field_size)
        podium_cutoff = self.thresholds.podium_cutoff(field_size)

        ordered = sort_standings(standings)
        positions = {s.id: index for index, s in enumerate(ordered, start=1)}
        first_bar = self._catch_up_points(ordered, first_cutoff, remaining)
        podium_bar = self._catch_up_points(ordered, podium_cutoff, remaining)

        annotated = []
        for standing in standings:
            position = positions[standing.id]
            clinched = position <= first_cutoff and standing.points > first_bar
            if not clinched:
                clinched = position <= podium_cutoff and standing.points > podium_bar
            annotated.append(replace(standing, is_clinched=clinched))

        clinched_names = [s.name for s in annotated if s.is_clinched]
        if clinched_names:
            logger.info(
                "Gibsonized with %d round(s) remaining: %s",
                remaining,
                ", ".join(clinched_names),
            )
        return annotated

    @staticmethod
    def _catch_up_points(
        ordered: Sequence[PlayerStanding], cutoff: int, remaining: int
    ) -> float:
        """Best total reachable by anyone ranked below ``cutoff``.

        Assumes each such player wins every remaining game. An empty
        comparison set gives zero.
        """
        reachable = [s.points + remaining for s in ordered[cutoff:]]
        return max(reachable + [0])


def detect_clinches(
    standings: Sequence[PlayerStanding],
    current_round: int,
    total_rounds: int,
    thresholds: ClinchThresholds = ClinchThresholds(),
) -> List[PlayerStanding]:
    """Convenience wrapper around :class:`ClinchDetector`."""
    return ClinchDetector(thresholds).annotate(standings, current_round, total_rounds)
