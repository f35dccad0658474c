"""Shared machinery for pairing formats.

Every format consumes the ranked, clinch-annotated standings and emits
pairings through a :class:`TableAllocator`. The rematch scan, the
Gibsonized pool and the final BYE are implemented here once and reused by
each format.
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

from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional, Sequence, Tuple

from tilepairing.models import Pairing, PairingHistory, PlayerStanding
from tilepairing.pairing.first_move import determine_first_move
from tilepairing.utils import setup_logger

logger = setup_logger(__name__)


def find_opponent_index(
    player: PlayerStanding,
    candidates: Sequence[PlayerStanding],
    history: PairingHistory,
    avoid_rematches: bool,
) -> int:
    """Pick an opponent for ``player`` from ``candidates``.

    With rematch avoidance, this is the first candidate in list order that
    the player has not met; otherwise, or when every candidate is a rematch,
    it is the first candidate. An unavoidable rematch is never an error.

    Returns:
        Index into ``candidates``
    """
    if avoid_rematches:
        for index, candidate in enumerate(candidates):
            if not history.have_played(player.id, candidate.id):
                return index
        if candidates:
            logger.debug(
                "No rematch-free opponent for %s, pairing with %s",
                player.name,
                candidates[0].name,
            )
    return 0


class TableAllocator:
    """Hands out sequential table numbers and records the pairings made."""

    def __init__(self, round_number: Optional[int] = None, first_table: int = 1):
        self.round_number = round_number
        self.next_table = first_table
        self.pairings: List[Pairing] = []

    def seat(self, player1: PlayerStanding, player2: PlayerStanding) -> Pairing:
        """Seat two players at the next table and stamp the first move."""
        table_number = self.next_table
        pairing = Pairing(
            table_number=table_number,
            player1=player1,
            player2=player2,
            first_move_player_id=determine_first_move(player1, player2, table_number),
            player1_clinched=player1.is_clinched,
            player2_clinched=False if player2.is_bye else player2.is_clinched,
            round_number=self.round_number,
        )
        self.pairings.append(pairing)
        self.next_table += 1
        return pairing

    def seat_bye(self, player: PlayerStanding) -> Pairing:
        """Seat the odd player out against a synthetic BYE."""
        logger.debug("%s receives a bye", player.name)
        return self.seat(player, PlayerStanding.bye())


class PairingStrategy(ABC):
    """A pairing format.

    Subclasses implement :meth:`pair_standings` and use the helpers below,
    which all share the same rematch scan.

    Attributes:
        name: Format tag
        avoid_rematches: Whether opponents already met are skipped when possible
        history: Pairs of players that have already met
    """

    name: ClassVar[str] = ""
    # Formats that only make sense with rematch avoidance override this
    forces_rematch_avoidance: ClassVar[bool] = False

    def __init__(
        self,
        avoid_rematches: bool = True,
        history: Optional[PairingHistory] = None,
    ):
        self.avoid_rematches = avoid_rematches or self.forces_rematch_avoidance
        self.history = history if history is not None else PairingHistory()

    def pair(
        self, standings: Sequence[PlayerStanding], round_number: Optional[int] = None
    ) -> List[Pairing]:
        """Pair ranked standings for one round.

        Args:
            standings: Ranked standings, best first, with clinches annotated
            round_number: Stamped onto each pairing

        Returns:
            Pairings in table order
        """
        tables = TableAllocator(round_number)
        self.pair_standings(list(standings), tables)
        return tables.pairings

    @abstractmethod
    def pair_standings(
        self, standings: List[PlayerStanding], tables: TableAllocator
    ) -> None:
        """Seat every player in ``standings`` through ``tables``."""

    # --- shared helpers ---

    def find_opponent(
        self, player: PlayerStanding, candidates: Sequence[PlayerStanding]
    ) -> int:
        return find_opponent_index(
            player, candidates, self.history, self.avoid_rematches
        )

    def pair_within(
        self, pool: Sequence[PlayerStanding], tables: TableAllocator
    ) -> List[PlayerStanding]:
        """Pair a pool in order, each player taking the first acceptable
        opponent below them.

        Returns:
            The unpaired player, if the pool was odd
        """
        remaining = list(pool)
        while len(remaining) >= 2:
            player1 = remaining.pop(0)
            player2 = remaining.pop(self.find_opponent(player1, remaining))
            tables.seat(player1, player2)
        return remaining

    def pair_across(
        self,
        upper: Sequence[PlayerStanding],
        lower: Sequence[PlayerStanding],
        tables: TableAllocator,
    ) -> Tuple[List[PlayerStanding], List[PlayerStanding]]:
        """Pair each player of ``upper`` with the first acceptable player of
        ``lower`` until either side runs out.

        Returns:
            The unpaired remainders of both sides
        """
        upper, lower = list(upper), list(lower)
        while upper and lower:
            player1 = upper.pop(0)
            player2 = lower.pop(self.find_opponent(player1, lower))
            tables.seat(player1, player2)
        return upper, lower

    def pair_clinched(
        self, standings: Sequence[PlayerStanding], tables: TableAllocator
    ) -> Tuple[List[PlayerStanding], List[PlayerStanding]]:
        """Seat Gibsonized players against each other first.

        An odd Gibsonized player out meets the lowest-ranked contender,
        preferring one they have not played.

        Returns:
            (contenders still to pair, Gibsonized player left unpaired)
        """
        clinched = [s for s in standings if s.is_clinched]
        contenders = [s for s in standings if not s.is_clinched]

        leftover = self.pair_within(clinched, tables)
        if leftover and contenders:
            gibsonized = leftover.pop()
            from_bottom = contenders[::-1]
            index = self.find_opponent(gibsonized, from_bottom)
            opponent = contenders.pop(len(contenders) - 1 - index)
            tables.seat(gibsonized, opponent)
        return contenders, leftover

    @staticmethod
    def pair_leftovers(
        pool: Sequence[PlayerStanding], tables: TableAllocator
    ) -> None:
        """Pair whoever is left consecutively, with a BYE for the last one.

        This fallback ignores match history.
        """
        remaining = list(pool)
        while len(remaining) >= 2:
            tables.seat(remaining.pop(0), remaining.pop(0))
        if remaining:
            tables.seat_bye(remaining.pop())


#  LocalWords:  Gibsonized
