import pytest

from tilepairing.models import Player, PlayerStanding
from tilepairing.pairing import determine_first_move


def _standing(pid, starts=0):
    return PlayerStanding(
        player=Player(id=pid, name=pid.upper(), rating=1500), previous_starts=starts
    )


@pytest.mark.parametrize(
    "starts1, starts2, table, expected",
    [
        (0, 1, 2, "one"),
        (3, 1, 1, "two"),
        (2, 2, 1, "one"),
        (2, 2, 2, "two"),
        (0, 0, 7, "one"),
        (0, 0, 10, "two"),
    ],
)
def test_first_move(starts1, starts2, table, expected):
    one, two = _standing("one", starts1), _standing("two", starts2)

    assert determine_first_move(one, two, table) == expected


def test_real_player_moves_first_against_bye():
    player = _standing("one", starts=5)
    bye = PlayerStanding.bye()

    assert determine_first_move(player, bye, 2) == "one"
    assert determine_first_move(bye, player, 1) == "one"


def test_first_move_is_deterministic():
    one, two = _standing("one", 1), _standing("two", 1)

    answers = {determine_first_move(one, two, 3) for _ in range(10)}

    assert answers == {"one"}
