import logging

import pytest

from tilepairing import generate_pairings
from tilepairing.exceptions import InvalidFormatException, PairingException
from tilepairing.models import (
    ClinchThresholds,
    GameResult,
    PairingRecord,
    Player,
    PlayerStanding,
    TournamentConfig,
)
from tilepairing.pairing import PairingFormat


def _players():
    return [
        Player(id="a", name="Ann", rating=1800),
        Player(id="b", name="Ben", rating=1700),
        Player(id="c", name="Cat", rating=1600),
        Player(id="d", name="Dev", rating=1500),
    ]


def _round_one():
    pairings = [
        PairingRecord("a", "b", first_move_player_id="a", round_number=1, id="g1"),
        PairingRecord("c", "d", first_move_player_id="c", round_number=1, id="g2"),
    ]
    results = [GameResult("g1", 400, 300), GameResult("g2", 350, 340)]
    return pairings, results


def _ids(pairings):
    return [(p.player1.id, p.player2.id) for p in pairings]


def test_pairs_from_results():
    pairings, results = _round_one()

    round_two = generate_pairings(
        _players(),
        "swiss",
        avoid_rematches=True,
        previous_pairings=pairings,
        current_round=2,
        total_rounds=5,
        results=results,
    )

    assert _ids(round_two) == [("a", "c"), ("d", "b")]
    # a and c both started once: odd table favours player1
    assert round_two[0].first_move_player_id == "a"
    # d and b never started: even table favours player2
    assert round_two[1].first_move_player_id == "b"
    assert all(p.round_number == 2 for p in round_two)


def test_generated_pairings_feed_back_as_history():
    round_one = generate_pairings(_players(), PairingFormat.SWISS, True, [], 1, 5)
    assert _ids(round_one) == [("a", "b"), ("c", "d")]

    round_two = generate_pairings(_players(), PairingFormat.SWISS, True, round_one, 2, 5)

    assert _ids(round_two) == [("a", "c"), ("b", "d")]


def test_accepts_precomputed_standings_without_mutating_them():
    standings = [
        PlayerStanding(player=p, wins=w, rank=0, is_clinched=True)
        for p, w in zip(_players(), [3, 2, 1, 0])
    ]
    before = [s.to_dict() for s in standings]

    pairings = generate_pairings(standings, "king-of-hill", True, [], 2, 9)

    assert [s.to_dict() for s in standings] == before
    assert _ids(pairings) == [("a", "d"), ("b", "c")]
    assert not any(p.player1_clinched or p.player2_clinched for p in pairings)
    assert [pairings[0].player1.rank, pairings[0].player2.rank] == [1, 4]


def test_repeated_calls_give_identical_output():
    pairings, results = _round_one()
    args = (_players(), "quartile", True, pairings, 2, 3)

    first = generate_pairings(*args, results=results)
    second = generate_pairings(*args, results=results)

    assert [p.to_dict() for p in first] == [p.to_dict() for p in second]


def test_config_clinch_thresholds_are_used():
    players = _players()[:2]
    pairings = [PairingRecord("a", "b", first_move_player_id="a", id="g1")]
    results = [GameResult("g1", 450, 300)]
    config = TournamentConfig(
        name="Club Night",
        clinch_thresholds=ClinchThresholds(first_place_fraction=1.0, podium_fraction=1.0),
    )

    default = generate_pairings(players, "swiss", False, pairings, 5, 5, results)
    configured = generate_pairings(
        players, "swiss", False, pairings, 5, 5, results, config=config
    )

    assert not default[0].player1_clinched
    assert configured[0].player1_clinched
    assert not configured[0].player2_clinched


def test_manual_format_returns_nothing():
    assert generate_pairings(_players(), "manual", True, [], 1, 5) == []


def test_unknown_format_is_rejected():
    with pytest.raises(InvalidFormatException, match="best-of-three"):
        generate_pairings(_players(), "best-of-three", True, [], 1, 5)


def test_invalid_format_is_a_pairing_error():
    assert issubclass(InvalidFormatException, PairingException)


@pytest.mark.parametrize("tag", [f.value for f in PairingFormat])
def test_format_tags_parse(tag):
    assert PairingFormat.parse(tag).value == tag


def test_bye_is_not_counted_as_a_start():
    players = _players()[:3]
    round_one = generate_pairings(players, "swiss", True, [], 1, 3)
    bye = [p for p in round_one if p.is_bye][0]
    assert bye.player1.id == "c"

    round_two = generate_pairings(players, "swiss", True, round_one, 2, 3)

    c = [s for p in round_two for s in (p.player1, p.player2) if s.id == "c"][0]
    assert c.previous_starts == 0


def test_generation_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="tilepairing"):
        generate_pairings(_players(), "swiss", True, [], 1, 5)

    assert "round 1/5" in caplog.text
    assert "swiss" in caplog.text


def test_mixed_player_inputs_are_recomputed():
    pairings, results = _round_one()
    players = _players()
    players[0] = PlayerStanding(player=players[0], wins=10)

    round_two = generate_pairings(players, "swiss", True, pairings, 2, 5, results)

    a = [p.player1 for p in round_two if p.player1.id == "a"][0]
    assert a.wins == 1
