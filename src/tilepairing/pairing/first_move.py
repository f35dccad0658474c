"""First-move assignment."""

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

from tilepairing.models import PlayerStanding


def determine_first_move(
    player1: PlayerStanding, player2: PlayerStanding, table_number: int
) -> str:
    """Decide which player of a pairing moves first.

    The player who has moved first fewer times goes first. On equal counts
    odd tables favour player1 and even tables favour player2. Against a BYE
    the real player always moves first.

    Returns:
        The id of the player moving first
    """
    if player2.is_bye:
        return player1.id
    if player1.is_bye:
        return player2.id

    if player1.previous_starts < player2.previous_starts:
        return player1.id
    if player2.previous_starts < player1.previous_starts:
        return player2.id
    return player1.id if table_number % 2 == 1 else player2.id
