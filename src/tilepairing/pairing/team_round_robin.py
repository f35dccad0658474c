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

"""
Team Round Robin Scheduling

Every team meets every other team once. Within a matchup, every member of
one team plays every member of the other, so a matchup between rosters of
sizes a and b occupies a * b tables.

The team schedule uses the circle method: the first team stays fixed while
the rest rotate one seat per round. With an odd number of teams a bye slot
is added and whichever team faces it sits the round out.

Example:
    >>> rr = TeamRoundRobin(players)
    >>> rr.number_of_rounds
    3
    >>> result = rr.get_round_pairings(1)
"""

from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from tilepairing.exceptions import (
    InsufficientTeamsException,
    ScheduleExhaustedException,
)
from tilepairing.models import (
    Pairing,
    PairingRecord,
    Player,
    PlayerStanding,
    TeamMatchup,
    TeamPairingResult,
    as_records,
)
from tilepairing.pairing.base import TableAllocator
from tilepairing.tournament.standings import count_previous_starts
from tilepairing.type_hints import Rosters, TeamSchedule
from tilepairing.utils import setup_logger

logger = setup_logger(__name__)


def group_players_by_team(players: Iterable[PlayerStanding]) -> Rosters:
    """Group players into rosters by team name, keeping input order.

    Players without a team are left out.
    """
    rosters: Rosters = {}
    for player in players:
        if not player.team_name:
            continue
        rosters.setdefault(player.team_name, []).append(player)
    return rosters


def build_round_robin_schedule(team_names: Sequence[str]) -> TeamSchedule:
    """Build a single round-robin schedule over ``team_names``.

    Args:
        team_names: Teams in seeding order; the first never rotates

    Returns:
        One list of (team1, team2) matchups per round. Matchups against the
        bye slot are left out, so with T teams there are T - 1 rounds for
        even T and T rounds for odd T.
    """
    seats: List[Optional[str]] = list(team_names)
    if len(seats) % 2 == 1:
        seats.append(None)

    schedule: TeamSchedule = []
    for _ in range(len(seats) - 1):
        round_matchups = []
        for i in range(len(seats) // 2):
            team1, team2 = seats[i], seats[len(seats) - 1 - i]
            if team1 is not None and team2 is not None:
                round_matchups.append((team1, team2))
        schedule.append(round_matchups)

        if len(seats) > 2:
            seats.insert(1, seats.pop())
    return schedule


def _as_standings(
    players: Iterable[Union[Player, PlayerStanding]],
    previous_pairings: Iterable[PairingRecord],
) -> List[PlayerStanding]:
    starts = count_previous_starts(previous_pairings)
    standings = []
    for player in players:
        if isinstance(player, PlayerStanding):
            standings.append(replace(player, is_clinched=False))
        else:
            standings.append(
                PlayerStanding(player=player, previous_starts=starts[player.id])
            )
    return standings


class TeamRoundRobin:
    """
    A team round-robin over the teams found in a player list.

    Attributes:
        rosters: Team name to members, in input order
        team_names: Sorted team names
        schedule: Matchups for every round, index 0 is round 1
        number_of_rounds: Length of the schedule
    """

    def __init__(
        self,
        players: Iterable[Union[Player, PlayerStanding]],
        previous_pairings: Iterable[Union[Pairing, PairingRecord]] = (),
    ) -> None:
        """
        Args:
            players: Players or standings; players without a team are ignored
            previous_pairings: Earlier games, used to balance first moves

        Raises:
            InsufficientTeamsException: If fewer than two teams are present
        """
        standings = _as_standings(players, as_records(previous_pairings))
        self.rosters: Rosters = group_players_by_team(standings)
        self.team_names: List[str] = sorted(self.rosters)

        if len(self.team_names) < 2:
            logger.error(
                "Invalid team count for round robin: %d", len(self.team_names)
            )
            raise InsufficientTeamsException(
                f"Need at least 2 teams for team round-robin, "
                f"got {len(self.team_names)}"
            )

        self.schedule: TeamSchedule = build_round_robin_schedule(self.team_names)
        self.number_of_rounds = len(self.schedule)
        logger.info(
            "Team round robin: %d teams over %d rounds",
            len(self.team_names),
            self.number_of_rounds,
        )

    def get_round_matchups(self, round_number: int) -> List[Tuple[str, str]]:
        """
        Get the team matchups of a round.

        Args:
            round_number: 1-based round number

        Raises:
            ScheduleExhaustedException: If the round is outside the schedule
        """
        if not 1 <= round_number <= self.number_of_rounds:
            raise ScheduleExhaustedException(
                f"Round {round_number} exceeds maximum rounds "
                f"({self.number_of_rounds})"
            )
        return self.schedule[round_number - 1]

    def get_round_pairings(self, round_number: int) -> TeamPairingResult:
        """
        Expand a round's team matchups into individual games.

        Tables are numbered from 1 across the whole round. Team games never
        carry clinched flags.
        """
        tables = TableAllocator(round_number)
        matchups: List[TeamMatchup] = []

        for team1, team2 in self.get_round_matchups(round_number):
            first_table = tables.next_table
            for player1 in self.rosters[team1]:
                for player2 in self.rosters[team2]:
                    tables.seat(player1, player2)
            matchups.append(
                TeamMatchup(
                    team1=team1,
                    team2=team2,
                    tables=list(range(first_table, tables.next_table)),
                )
            )

        return TeamPairingResult(pairings=tables.pairings, team_matchups=matchups)


def generate_team_round_robin_pairings(
    players: Iterable[Union[Player, PlayerStanding]],
    current_round: int,
    previous_team_matchups: Iterable[Union[TeamMatchup, Dict[str, str]]] = (),
    previous_pairings: Iterable[Union[Pairing, PairingRecord]] = (),
) -> TeamPairingResult:
    """Generate one round of a team round-robin.

    ``previous_team_matchups`` is accepted for callers that track it, but
    the circle schedule never repeats a matchup so it is only logged.
    """
    previous_team_matchups = list(previous_team_matchups)
    if previous_team_matchups:
        logger.debug(
            "Ignoring %d previous team matchups, the schedule is fixed",
            len(previous_team_matchups),
        )
    return TeamRoundRobin(players, previous_pairings).get_round_pairings(
        current_round
    )


#  LocalWords:  rosters
