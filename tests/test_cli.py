import json

import pytest

from tilepairing.cli import main


def _snapshot(tmp_path, **config):
    data = {
        "config": {"name": "Club Night", "num_rounds": 4, **config},
        "players": [
            {"id": "a", "name": "Ann", "rating": 1800, "team_name": "North"},
            {"id": "b", "name": "Ben", "rating": 1700, "team_name": "South"},
            {"id": "c", "name": "Cat", "rating": 1600, "team_name": "North"},
            {"id": "d", "name": "Dev", "rating": 1500, "team_name": "South"},
        ],
        "pairings": [
            {"id": "g1", "round_number": 1, "player1_id": "a", "player2_id": "b",
             "first_move_player_id": "a"},
            {"id": "g2", "round_number": 1, "player1_id": "c", "player2_id": "d",
             "first_move_player_id": "d"},
        ],
        "results": [
            {"pairing_id": "g1", "player1_score": 420, "player2_score": 380},
            {"pairing_id": "g2", "player1_score": 300, "player2_score": 410},
        ],
    }
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_standings_table(tmp_path, capsys):
    assert main(["standings", _snapshot(tmp_path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert "Rank" in lines[0]
    assert [line.split()[1] for line in lines[1:]] == ["Dev", "Ann", "Ben", "Cat"]


def test_standings_json(tmp_path, capsys):
    assert main(["standings", _snapshot(tmp_path), "--json"]) == 0

    standings = json.loads(capsys.readouterr().out)
    assert standings[0]["id"] == "d"
    assert standings[0]["spread"] == 110
    assert standings[0]["rank"] == 1


def test_team_standings_json(tmp_path, capsys):
    assert main(["standings", _snapshot(tmp_path), "--teams", "--json"]) == 0

    teams = json.loads(capsys.readouterr().out)
    assert [t["team_name"] for t in teams] == ["South", "North"]
    assert teams[0]["matches_drawn"] == 1


def test_pair_next_round(tmp_path, capsys):
    assert main(["pair", _snapshot(tmp_path), "--json"]) == 0

    pairings = json.loads(capsys.readouterr().out)
    assert [(p["player1"]["id"], p["player2"]["id"]) for p in pairings] == [
        ("d", "a"),
        ("b", "c"),
    ]
    assert all(p["round_number"] == 2 for p in pairings)


def test_pair_with_format_and_rematches(tmp_path, capsys):
    args = ["pair", _snapshot(tmp_path), "--format", "king-of-hill", "--allow-rematches"]

    assert main(args + ["--round", "3", "--json"]) == 0

    pairings = json.loads(capsys.readouterr().out)
    assert [(p["player1"]["id"], p["player2"]["id"]) for p in pairings] == [
        ("d", "c"),
        ("a", "b"),
    ]


def test_pair_table_marks_first_mover(tmp_path, capsys):
    assert main(["pair", _snapshot(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Club Night: round 2 (swiss)")
    assert "*" in out


def test_teams_round(tmp_path, capsys):
    assert main(["teams", _snapshot(tmp_path), "--round", "1", "--json"]) == 0

    result = json.loads(capsys.readouterr().out)
    assert result["team_matchups"] == [
        {"team1": "North", "team2": "South", "tables": [1, 2, 3, 4]}
    ]


def test_teams_table_shows_current_points(tmp_path, capsys):
    assert main(["teams", _snapshot(tmp_path), "--round", "1"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Round 1: North vs South")
    assert "Ann (1)" in out
    assert "Dev (1)" in out
    assert "Cat (0)" in out


def test_exhausted_team_schedule_is_an_error(tmp_path, capsys):
    assert main(["teams", _snapshot(tmp_path), "--round", "2"]) == 1

    assert "exceeds maximum rounds" in capsys.readouterr().err


def test_missing_snapshot_is_an_error(tmp_path, capsys):
    assert main(["standings", str(tmp_path / "nope.json")]) == 1

    assert "Cannot read snapshot" in capsys.readouterr().err


def test_malformed_snapshot_is_an_error(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    assert main(["pair", str(path)]) == 1

    assert "not valid JSON" in capsys.readouterr().err


def test_bad_config_is_an_error(tmp_path, capsys):
    assert main(["pair", _snapshot(tmp_path, num_rounds=0)]) == 1

    assert "Number of rounds" in capsys.readouterr().err


def test_string_config_values_are_normalized(tmp_path, capsys):
    snapshot = _snapshot(tmp_path, num_rounds="2", first_place_fraction="0.25")

    assert main(["pair", snapshot, "--json"]) == 0

    pairings = json.loads(capsys.readouterr().out)
    assert [(p["player1"]["id"], p["player2"]["id"]) for p in pairings] == [
        ("d", "a"),
        ("b", "c"),
    ]


def test_string_flag_is_an_error(tmp_path, capsys):
    assert main(["pair", _snapshot(tmp_path, avoid_rematches="false")]) == 1

    assert "Avoid rematches must be true or false" in capsys.readouterr().err


def test_fractional_rating_is_an_error(tmp_path, capsys):
    path = tmp_path / "snapshot.json"
    data = {"config": {"name": "Open"}, "players": [{"id": "a", "name": "Ann", "rating": 1800.5}]}
    path.write_text(json.dumps(data), encoding="utf-8")

    assert main(["standings", str(path)]) == 1

    assert "Invalid rating" in capsys.readouterr().err


def test_unknown_format_is_refused_by_argparse(tmp_path):
    with pytest.raises(SystemExit):
        main(["pair", _snapshot(tmp_path), "--format", "dutch"])


def test_roster_builds_snapshot(tmp_path, capsys):
    roster = tmp_path / "players.txt"
    roster.write_text("Ann, North, 1800\nBen, South, 1700\nBen, 1500\n", encoding="utf-8")

    assert main(["roster", str(roster), "--name", "League"]) == 0

    captured = capsys.readouterr()
    snapshot = json.loads(captured.out)
    assert snapshot["config"]["name"] == "League"
    assert snapshot["config"]["team_mode"] is True
    assert [p["id"] for p in snapshot["players"]] == ["p1", "p2"]
    assert "Duplicate name" in captured.err
