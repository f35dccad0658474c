"""Standings and clinch calculation for Tile Pairing.

Everything here is a pure projection over players, pairings and results;
nothing is cached between calls.
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

from tilepairing.tournament.clinch import ClinchDetector, detect_clinches
from tilepairing.tournament.standings import (
    StandingsCalculator,
    calculate_standings,
    count_previous_starts,
    rank_standings,
    sort_standings,
)
from tilepairing.tournament.team_standings import (
    TeamStandingsCalculator,
    calculate_team_standings,
)

__all__ = [
    "StandingsCalculator",
    "calculate_standings",
    "count_previous_starts",
    "rank_standings",
    "sort_standings",
    "ClinchDetector",
    "detect_clinches",
    "TeamStandingsCalculator",
    "calculate_team_standings",
]
