import pytest

from tilepairing.constants import BYE_PLAYER_ID
from tilepairing.models import PairingHistory, Player, PlayerStanding
from tilepairing.pairing import PairingFormat, create_strategy
from tilepairing.pairing.quartile import split_quartiles

PAIRING_FORMATS = [
    PairingFormat.SWISS,
    PairingFormat.FONTE_SWISS,
    PairingFormat.KING_OF_HILL,
    PairingFormat.ROUND_ROBIN,
    PairingFormat.QUARTILE,
]


def _field(n, wins=None, clinched=()):
    """Ranked standings p1..pn, best first."""
    standings = []
    for i in range(1, n + 1):
        standings.append(
            PlayerStanding(
                player=Player(id=f"p{i}", name=f"Player {i}", rating=1500),
                wins=wins[i - 1] if wins else 0,
                spread=1000 - 10 * i,
                rank=i,
                is_clinched=f"p{i}" in clinched,
            )
        )
    return standings


def _history(*pairs):
    history = PairingHistory()
    for a, b in pairs:
        history.add_pairing(a, b)
    return history


def _pair(pairing_format, standings, history=None, avoid_rematches=True):
    strategy = create_strategy(
        pairing_format, avoid_rematches=avoid_rematches, history=history
    )
    return strategy.pair(standings, round_number=3)


def _ids(pairings):
    return [(p.player1.id, p.player2.id) for p in pairings]


def _assert_covers(pairings, standings):
    seated = [pid for p in pairings for pid in p.player_ids if pid != BYE_PLAYER_ID]
    assert sorted(seated) == sorted(s.id for s in standings)
    assert sum(1 for p in pairings if p.is_bye) == len(standings) % 2
    assert [p.table_number for p in pairings] == list(range(1, len(pairings) + 1))
    assert all(p.round_number == 3 for p in pairings)


@pytest.mark.parametrize("pairing_format", PAIRING_FORMATS)
@pytest.mark.parametrize("n", [0, 1, 2, 5, 8, 9, 13])
def test_every_player_is_seated_once(pairing_format, n):
    standings = _field(n)

    pairings = _pair(pairing_format, standings)

    _assert_covers(pairings, standings)


@pytest.mark.parametrize("pairing_format", PAIRING_FORMATS)
@pytest.mark.parametrize("clinched", [("p1",), ("p1", "p2"), ("p1", "p2", "p3")])
@pytest.mark.parametrize("n", [6, 9])
def test_coverage_with_gibsonized_players(pairing_format, clinched, n):
    standings = _field(n, clinched=clinched)

    pairings = _pair(pairing_format, standings)

    _assert_covers(pairings, standings)


@pytest.mark.parametrize("pairing_format", PAIRING_FORMATS)
def test_coverage_when_everyone_has_met(pairing_format):
    standings = _field(7, wins=[3, 3, 2, 2, 1, 1, 0])
    ids = [s.id for s in standings]
    history = _history(*[(a, b) for a in ids for b in ids if a < b])

    pairings = _pair(pairing_format, standings, history)

    _assert_covers(pairings, standings)


@pytest.mark.parametrize("pairing_format", PAIRING_FORMATS)
def test_inputs_are_untouched(pairing_format):
    standings = _field(9, clinched=("p1",))
    before = [s.to_dict() for s in standings]

    _pair(pairing_format, standings, _history(("p1", "p2")))

    assert [s.to_dict() for s in standings] == before


def test_manual_pairs_nobody():
    assert _pair(PairingFormat.MANUAL, _field(6)) == []


# --- Swiss ---


def test_swiss_pairs_neighbours():
    pairings = _pair(PairingFormat.SWISS, _field(4))

    assert _ids(pairings) == [("p1", "p2"), ("p3", "p4")]


def test_swiss_skips_rematch():
    pairings = _pair(PairingFormat.SWISS, _field(4), _history(("p1", "p2")))

    assert _ids(pairings) == [("p1", "p3"), ("p2", "p4")]


def test_swiss_allows_rematch_when_avoidance_is_off():
    pairings = _pair(
        PairingFormat.SWISS, _field(4), _history(("p1", "p2")), avoid_rematches=False
    )

    assert _ids(pairings) == [("p1", "p2"), ("p3", "p4")]


def test_swiss_unavoidable_rematch_takes_next_player():
    history = _history(("p1", "p2"), ("p1", "p3"), ("p1", "p4"))

    pairings = _pair(PairingFormat.SWISS, _field(4), history)

    assert _ids(pairings) == [("p1", "p2"), ("p3", "p4")]


def test_swiss_odd_player_gets_bye():
    pairings = _pair(PairingFormat.SWISS, _field(5))

    assert _ids(pairings)[-1] == ("p5", BYE_PLAYER_ID)
    bye = pairings[-1]
    assert bye.first_move_player_id == "p5"
    assert not bye.player2_clinched


def test_swiss_gibsonized_players_meet_first():
    pairings = _pair(PairingFormat.SWISS, _field(6, clinched=("p1", "p2")))

    assert _ids(pairings) == [("p1", "p2"), ("p3", "p4"), ("p5", "p6")]
    assert pairings[0].player1_clinched and pairings[0].player2_clinched


def test_swiss_odd_gibsonized_player_meets_lowest_contender():
    pairings = _pair(PairingFormat.SWISS, _field(6, clinched=("p1", "p2", "p3")))

    assert _ids(pairings) == [("p1", "p2"), ("p3", "p6"), ("p4", "p5")]
    assert pairings[1].player1_clinched
    assert not pairings[1].player2_clinched


def test_swiss_odd_gibsonized_player_avoids_rematch():
    standings = _field(6, clinched=("p1", "p2", "p3"))

    pairings = _pair(PairingFormat.SWISS, standings, _history(("p3", "p6")))

    assert _ids(pairings) == [("p1", "p2"), ("p3", "p5"), ("p4", "p6")]


def test_single_gibsonized_player_gets_bye_when_alone():
    pairings = _pair(PairingFormat.SWISS, _field(1, clinched=("p1",)))

    assert _ids(pairings) == [("p1", BYE_PLAYER_ID)]
    assert pairings[0].player1_clinched
    assert not pairings[0].player2_clinched


# --- Round-Robin ---


def test_round_robin_always_avoids_rematches():
    strategy = create_strategy(PairingFormat.ROUND_ROBIN, avoid_rematches=False)
    assert strategy.avoid_rematches

    pairings = _pair(
        PairingFormat.ROUND_ROBIN,
        _field(4),
        _history(("p1", "p2")),
        avoid_rematches=False,
    )

    assert _ids(pairings) == [("p1", "p3"), ("p2", "p4")]


# --- Fonte-Swiss ---


def test_fonte_swiss_pairs_halves_of_each_score_group():
    standings = _field(8, wins=[1, 1, 1, 1, 0, 0, 0, 0])

    pairings = _pair(PairingFormat.FONTE_SWISS, standings)

    assert _ids(pairings) == [
        ("p1", "p3"),
        ("p2", "p4"),
        ("p5", "p7"),
        ("p6", "p8"),
    ]


def test_fonte_swiss_pools_leftovers_of_odd_groups():
    standings = _field(6, wins=[1, 1, 1, 0, 0, 0])

    pairings = _pair(PairingFormat.FONTE_SWISS, standings)

    assert _ids(pairings) == [("p1", "p3"), ("p4", "p6"), ("p2", "p5")]


def test_fonte_swiss_orders_group_by_spread():
    standings = _field(4)
    standings[3].spread = 5000

    pairings = _pair(PairingFormat.FONTE_SWISS, standings)

    assert _ids(pairings) == [("p4", "p2"), ("p1", "p3")]


def test_fonte_swiss_skips_rematch_across_halves():
    pairings = _pair(PairingFormat.FONTE_SWISS, _field(4), _history(("p1", "p3")))

    assert _ids(pairings) == [("p1", "p4"), ("p2", "p3")]


# --- King of the Hill ---


def test_king_of_the_hill_folds_the_standings():
    pairings = _pair(PairingFormat.KING_OF_HILL, _field(8))

    assert _ids(pairings) == [("p1", "p8"), ("p2", "p7"), ("p3", "p6"), ("p4", "p5")]


def test_king_of_the_hill_swaps_in_unplayed_opponent():
    pairings = _pair(PairingFormat.KING_OF_HILL, _field(8), _history(("p1", "p8")))

    assert _ids(pairings) == [("p1", "p7"), ("p2", "p8"), ("p3", "p6"), ("p4", "p5")]


def test_king_of_the_hill_never_reuses_an_earlier_opponent():
    history = _history(("p2", "p3"))

    pairings = _pair(PairingFormat.KING_OF_HILL, _field(4), history)

    assert _ids(pairings) == [("p1", "p4"), ("p2", "p3")]


def test_king_of_the_hill_odd_field_gives_middle_player_bye():
    pairings = _pair(PairingFormat.KING_OF_HILL, _field(5))

    assert _ids(pairings) == [("p1", "p5"), ("p2", "p4"), ("p3", BYE_PLAYER_ID)]


# --- Quartile ---


def test_split_quartiles_sizes():
    sizes = [len(q) for q in split_quartiles(_field(10))]

    assert sizes == [3, 3, 3, 1]


def test_quartile_pairs_neighbouring_quartiles():
    pairings = _pair(PairingFormat.QUARTILE, _field(8))

    assert _ids(pairings) == [("p1", "p3"), ("p2", "p4"), ("p5", "p7"), ("p6", "p8")]


def test_quartile_pools_leftovers():
    pairings = _pair(PairingFormat.QUARTILE, _field(10))

    assert _ids(pairings) == [
        ("p1", "p4"),
        ("p2", "p5"),
        ("p3", "p6"),
        ("p7", "p10"),
        ("p8", "p9"),
    ]


def test_quartile_gibsonized_players_are_taken_out_first():
    standings = _field(9, clinched=("p1", "p2", "p3"))

    pairings = _pair(PairingFormat.QUARTILE, standings)

    assert _ids(pairings) == [
        ("p1", "p2"),
        ("p3", "p9"),
        ("p4", "p5"),
        ("p6", "p7"),
        ("p8", BYE_PLAYER_ID),
    ]
