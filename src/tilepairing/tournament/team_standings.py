"""Team standings for team-mode tournaments.

This is a read-only aggregation over individual results. It plays no part
in scheduling.
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

from collections import defaultdict
from typing import Dict, Iterable, List

from tilepairing.models import GameResult, PairingRecord, Player, TeamStanding
from tilepairing.utils import setup_logger

logger = setup_logger(__name__)


class TeamStandingsCalculator:
    """Aggregates member results into team standings.

    Game totals (wins, losses, spread) are summed over every game a member
    played. Match outcomes compare games won by each side across all
    head-to-head games between two teams: more games won is a match win,
    equal is a draw, fewer is a loss.
    """

    def calculate(
        self,
        players: Iterable[Player],
        pairings: Iterable[PairingRecord],
        results: Iterable[GameResult],
    ) -> List[TeamStanding]:
        """Calculate ranked team standings.

        Players without a team are ignored. Results whose pairing is unknown
        are skipped.

        Returns:
            Team standings ordered by matches won, total spread and total
            games won, all descending
        """
        team_of: Dict[str, str] = {}
        teams: Dict[str, TeamStanding] = {}
        for player in players:
            if not player.team_name:
                continue
            team_of[player.id] = player.team_name
            if player.team_name not in teams:
                teams[player.team_name] = TeamStanding(team_name=player.team_name)
            teams[player.team_name].players.append(player)

        pairings_by_id = {p.id: p for p in pairings if p.id is not None}
        # head_to_head[team][opponent_team] = [games won, games lost]
        head_to_head: Dict[str, Dict[str, List[int]]] = defaultdict(
            lambda: defaultdict(lambda: [0, 0])
        )

        for result in results:
            pairing = pairings_by_id.get(result.pairing_id)
            if pairing is None:
                logger.debug(
                    "Skipping team result for unknown pairing %s", result.pairing_id
                )
                continue
            for player_id, opponent_id in (
                (pairing.player1_id, pairing.player2_id),
                (pairing.player2_id, pairing.player1_id),
            ):
                team_name = team_of.get(player_id)
                if team_name is None:
                    continue
                own_score, opponent_score = result.scores_for(pairing, player_id)
                standing = teams[team_name]
                standing.total_spread += own_score - opponent_score
                if own_score > opponent_score:
                    standing.total_games_won += 1
                elif own_score < opponent_score:
                    standing.total_games_lost += 1

                opponent_team = team_of.get(opponent_id)
                if opponent_team is None or opponent_team == team_name:
                    continue
                tally = head_to_head[team_name][opponent_team]
                if own_score > opponent_score:
                    tally[0] += 1
                elif own_score < opponent_score:
                    tally[1] += 1

        for team_name, standing in teams.items():
            for games_won, games_lost in head_to_head[team_name].values():
                if games_won > games_lost:
                    standing.matches_won += 1
                elif games_won < games_lost:
                    standing.matches_lost += 1
                else:
                    standing.matches_drawn += 1

        ordered = sorted(
            (teams[name] for name in sorted(teams)),
            key=lambda t: t.sort_key(),
            reverse=True,
        )
        for rank, standing in enumerate(ordered, start=1):
            standing.rank = rank
        return ordered


def calculate_team_standings(
    players: Iterable[Player],
    pairings: Iterable[PairingRecord],
    results: Iterable[GameResult],
) -> List[TeamStanding]:
    """Convenience wrapper around :class:`TeamStandingsCalculator`."""
    return TeamStandingsCalculator().calculate(players, pairings, results)
