from tilepairing.models import GameResult, PairingRecord, Player
from tilepairing.tournament import calculate_team_standings


def _players():
    return [
        Player(id="a1", name="A1", team_name="Anagrams"),
        Player(id="a2", name="A2", team_name="Anagrams"),
        Player(id="b1", name="B1", team_name="Bingos"),
        Player(id="b2", name="B2", team_name="Bingos"),
        Player(id="c1", name="C1", team_name="Challenges"),
        Player(id="solo", name="Solo"),
    ]


def _game(gid, p1, p2, s1, s2):
    return PairingRecord(p1, p2, id=gid), GameResult(gid, s1, s2)


def test_team_match_outcomes_and_ranking():
    games = [
        # Anagrams beat Bingos 3 games to 1
        _game("g1", "a1", "b1", 400, 350),
        _game("g2", "a1", "b2", 380, 300),
        _game("g3", "a2", "b1", 410, 330),
        _game("g4", "a2", "b2", 300, 420),
        # Bingos and Challenges split
        _game("g5", "b1", "c1", 390, 380),
        _game("g6", "b2", "c1", 360, 370),
    ]
    pairings = [g[0] for g in games]
    results = [g[1] for g in games]

    standings = calculate_team_standings(_players(), pairings, results)

    assert [t.team_name for t in standings] == ["Anagrams", "Challenges", "Bingos"]
    assert [t.rank for t in standings] == [1, 2, 3]
    anagrams, challenges, bingos = standings
    assert (anagrams.matches_won, anagrams.matches_lost) == (1, 0)
    assert (bingos.matches_won, bingos.matches_lost, bingos.matches_drawn) == (0, 1, 1)
    assert challenges.matches_drawn == 1
    assert anagrams.total_games_won == 3
    assert anagrams.total_games_lost == 1
    assert anagrams.total_spread == 50 + 80 + 80 - 120
    assert bingos.total_spread == -(50 + 80 + 80 - 120) + 10 - 10


def test_players_without_team_and_unknown_results_are_skipped():
    pairing, result = _game("g1", "a1", "solo", 400, 300)

    standings = calculate_team_standings(
        _players(), [pairing], [result, GameResult("nope", 1, 0)]
    )

    anagrams = [t for t in standings if t.team_name == "Anagrams"][0]
    assert anagrams.total_games_won == 1
    assert anagrams.matches_won == 0
    assert all(t.team_name != "" for t in standings)
    assert len(standings) == 3


def test_rosters_are_attached():
    standings = calculate_team_standings(_players(), [], [])

    rosters = {t.team_name: [p.id for p in t.players] for t in standings}
    assert rosters == {"Anagrams": ["a1", "a2"], "Bingos": ["b1", "b2"], "Challenges": ["c1"]}
