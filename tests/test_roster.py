import pytest

from tilepairing.exceptions import (
    RatingValidationException,
    RosterParseException,
    ValidationException,
)
from tilepairing.models import Player
from tilepairing.roster import build_players, parse_player_input
from tilepairing.utils.validation import validate_rating


def test_parses_all_line_shapes():
    parsed = parse_player_input(
        """
        Alice Able, 1500
        Bob Baker, Blanks, 1620
        Cara Cole 1710

        """
    )

    assert [(p.name, p.team_name, p.rating, p.is_valid) for p in parsed] == [
        ("Alice Able", None, 1500, True),
        ("Bob Baker", "Blanks", 1620, True),
        ("Cara Cole", None, 1710, True),
    ]


@pytest.mark.parametrize(
    "line, error",
    [
        ("Dana", "Missing rating"),
        ("Dana,", "Missing rating"),
        (", 1500", "Missing name"),
        ("Dana, 3001", "Invalid rating (0-3000)"),
        ("Dana, -5", "Invalid rating (0-3000)"),
        ("Dana, strong", "Invalid rating (0-3000)"),
        ("Dana 15.5", "Invalid rating (0-3000)"),
    ],
)
def test_rejected_lines(line, error):
    (parsed,) = parse_player_input(line)

    assert not parsed.is_valid
    assert parsed.error == error
    assert parsed.rating == 0


def test_rating_bounds_are_inclusive():
    parsed = parse_player_input("Low, 0\nHigh, 3000")

    assert [p.rating for p in parsed] == [0, 3000]
    assert all(p.is_valid for p in parsed)


def test_duplicate_names_ignore_case():
    parsed = parse_player_input("Eve, 1400\nEVE, 1500\neve 1600")

    assert [p.is_valid for p in parsed] == [True, False, False]
    assert parsed[1].error == "Duplicate name"


def test_invalid_line_does_not_reserve_its_name():
    parsed = parse_player_input("Finn, 9999\nFinn, 1500")

    assert [p.is_valid for p in parsed] == [False, True]


def test_build_players_assigns_stable_ids():
    parsed = parse_player_input("Gus, 1500\nbad line\nHal, Tiles, 1300")

    players = build_players(parsed)

    assert [(p.id, p.name, p.rating, p.team_name) for p in players] == [
        ("p1", "Gus", 1500, None),
        ("p2", "Hal", 1300, "Tiles"),
    ]
    assert build_players(parse_player_input("Gus, 1500\nbad line\nHal, Tiles, 1300")) == players


def test_build_players_needs_a_valid_entry():
    with pytest.raises(RosterParseException):
        build_players(parse_player_input("nobody\n"))

    assert issubclass(RosterParseException, ValidationException)


@pytest.mark.parametrize("rating", [1500.7, "1500.5", True])
def test_fractional_ratings_are_rejected(rating):
    assert not validate_rating(rating)


def test_integral_float_rating_is_accepted():
    assert validate_rating(1500.0).sanitized_value == "1500"


def test_stored_player_rating_must_be_whole():
    with pytest.raises(RatingValidationException):
        Player.from_dict({"id": "p1", "name": "Ivy", "rating": 1500.7})

    assert Player.from_dict({"id": "p1", "name": "Ivy", "rating": 1500.0}).rating == 1500
    assert Player.from_dict({"id": "p1", "name": "Ivy"}).rating == 0
