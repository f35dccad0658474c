"""Standings calculation for tournaments.

This module derives win/loss/draw records, points, spread and first-move
counts from raw results, and orders players for pairing.
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

from collections import Counter
from typing import Dict, Iterable, List, Optional

from tilepairing.models import GameResult, PairingRecord, Player, PlayerStanding
from tilepairing.type_hints import StandingKey
from tilepairing.utils import setup_logger

logger = setup_logger(__name__)


def sort_standings(standings: Iterable[PlayerStanding]) -> List[PlayerStanding]:
    """Order standings by points, then spread, then rating, all descending.

    There is no further tie-break; players with identical keys keep their
    relative input order.
    """
    return sorted(standings, key=lambda s: s.sort_key(), reverse=True)


def rank_standings(standings: Iterable[PlayerStanding]) -> List[PlayerStanding]:
    """Sort standings and assign ranks in place.

    A player's rank is one more than the number of players with a strictly
    better key, so exact ties share a rank.

    Returns:
        The standings in rank order
    """
    ordered = sort_standings(standings)
    previous_key: Optional[StandingKey] = None
    rank = 0
    for position, standing in enumerate(ordered, start=1):
        key = standing.sort_key()
        if key != previous_key:
            rank = position
            previous_key = key
        standing.rank = rank
    return ordered


def count_previous_starts(pairings: Iterable[PairingRecord]) -> Counter:
    """Count how often each player moved first. BYE pairings do not count."""
    starts: Counter = Counter()
    for pairing in pairings:
        if pairing.is_bye or pairing.first_move_player_id is None:
            continue
        starts[pairing.first_move_player_id] += 1
    return starts


class StandingsCalculator:
    """Calculates player standings from pairing and result history.

    Standings are a pure projection: every call starts from zeroed records,
    so the same inputs always give the same standings.
    """

    def calculate(
        self,
        players: Iterable[Player],
        pairings: Iterable[PairingRecord] = (),
        results: Iterable[GameResult] = (),
    ) -> List[PlayerStanding]:
        """Calculate ranked standings for all players.

        Args:
            players: Registered players
            pairings: Every stored pairing, used to resolve results and to
                count previous first moves
            results: Every recorded result

        Returns:
            Standings in rank order
        """
        pairings = list(pairings)
        standings: Dict[str, PlayerStanding] = {
            player.id: PlayerStanding(player=player) for player in players
        }
        pairings_by_id = {p.id: p for p in pairings if p.id is not None}

        for result in results:
            pairing = pairings_by_id.get(result.pairing_id)
            if pairing is None:
                logger.debug(
                    "Skipping result for unknown pairing %s", result.pairing_id
                )
                continue
            self._apply_result(standings, pairing, result)

        self._count_previous_starts(standings, pairings)
        return rank_standings(standings.values())

    def _apply_result(
        self,
        standings: Dict[str, PlayerStanding],
        pairing: PairingRecord,
        result: GameResult,
    ) -> None:
        """Credit one result to both of its players, where still registered."""
        for player_id in (pairing.player1_id, pairing.player2_id):
            standing = standings.get(player_id)
            if standing is None:
                logger.debug(
                    "Skipping result %s for unregistered player %s",
                    result.pairing_id,
                    player_id,
                )
                continue
            scores = result.scores_for(pairing, player_id)
            if scores is None:
                continue
            own_score, opponent_score = scores
            standing.spread += own_score - opponent_score
            if own_score > opponent_score:
                standing.wins += 1
            elif own_score < opponent_score:
                standing.losses += 1
            else:
                standing.draws += 1

    @staticmethod
    def _count_previous_starts(
        standings: Dict[str, PlayerStanding], pairings: Iterable[PairingRecord]
    ) -> None:
        for player_id, starts in count_previous_starts(pairings).items():
            standing = standings.get(player_id)
            if standing is not None:
                standing.previous_starts = starts


def calculate_standings(
    players: Iterable[Player],
    pairings: Iterable[PairingRecord] = (),
    results: Iterable[GameResult] = (),
) -> List[PlayerStanding]:
    """Convenience wrapper around :class:`StandingsCalculator`."""
    return StandingsCalculator().calculate(players, pairings, results)
