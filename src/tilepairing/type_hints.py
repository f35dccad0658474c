"""Type hints used in Tile Pairing."""

from typing import Dict, FrozenSet, List, Tuple

PlayerId = str
# Unordered pair of player ids that have met
Matchup = FrozenSet[PlayerId]
# (points, spread, rating), compared descending
StandingKey = Tuple[float, float, int]
# One round of a team schedule: (team1, team2) tuples
TeamRound = List[Tuple[str, str]]
# Full team schedule, index 0 is round 1
TeamSchedule = List[TeamRound]
Rosters = Dict[str, List["PlayerStanding"]]

#  LocalWords:  StandingKey TeamRound
