"""Command-line interface for the pairing engine.

This module reads tournament snapshots and prints standings, the next
round's pairings or a team round, either as tables or as JSON.
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

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

from tilepairing.constants import FORMAT_DESCRIPTIONS
from tilepairing.exceptions import FileLoadException, TilePairingException
from tilepairing.models import Pairing, TournamentConfig
from tilepairing.pairing import generate_pairings, generate_team_round_robin_pairings
from tilepairing.roster import build_players, parse_player_input
from tilepairing.snapshot import TournamentSnapshot, load_snapshot
from tilepairing.tournament import calculate_standings, calculate_team_standings
from tilepairing.utils import set_package_level, setup_logger

logger = setup_logger(__name__)


def positive_int(value: str) -> int:
    """Parse a strictly positive integer argument.

    Raises:
        argparse.ArgumentTypeError: If the value is not a positive integer
    """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"Must be at least 1, got {number}")
    return number


def _emit_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


def _describe_player(pairing: Pairing, which: int) -> str:
    player = pairing.player1 if which == 1 else pairing.player2
    clinched = pairing.player1_clinched if which == 1 else pairing.player2_clinched
    marker = "*" if player.id == pairing.first_move_player_id else " "
    label = f"{marker}{player.name}"
    if not player.is_bye:
        label += f" ({player.points:g})"
    if clinched:
        label += " [G]"
    return label


def print_pairings(pairings: Sequence[Pairing], title: str) -> None:
    """Print pairings as a table. ``*`` marks the first mover, ``[G]`` a
    Gibsonized player."""
    print(title)
    print("=" * len(title))
    if not pairings:
        print("(no pairings)")
        return
    for pairing in pairings:
        print(
            f"{pairing.table_number:>4}  {_describe_player(pairing, 1):<32} "
            f"vs  {_describe_player(pairing, 2)}"
        )


def run_standings(args: argparse.Namespace) -> int:
    snapshot = load_snapshot(args.file)
    if args.teams:
        return _print_team_standings(snapshot, args.json)

    standings = calculate_standings(
        snapshot.players, snapshot.pairings, snapshot.results
    )

    if args.json:
        _emit_json([s.to_dict() for s in standings])
        return 0

    print(f"{'Rank':>4}  {'Player':<24} {'W-L-D':>8} {'Pts':>5} {'Spread':>7} {'Rtg':>5}")
    for s in standings:
        record = f"{s.wins}-{s.losses}-{s.draws}"
        print(
            f"{s.rank:>4}  {s.name:<24} {record:>8} {s.points:>5g} "
            f"{s.spread:>+7g} {s.rating:>5}"
        )
    return 0


def _print_team_standings(snapshot: TournamentSnapshot, as_json: bool) -> int:
    teams = calculate_team_standings(
        snapshot.players, snapshot.pairings, snapshot.results
    )

    if as_json:
        _emit_json([t.to_dict() for t in teams])
        return 0

    print(f"{'Rank':>4}  {'Team':<24} {'W-L-D':>8} {'Games':>7} {'Spread':>7}")
    for t in teams:
        record = f"{t.matches_won}-{t.matches_lost}-{t.matches_drawn}"
        games = f"{t.total_games_won}-{t.total_games_lost}"
        print(
            f"{t.rank:>4}  {t.team_name:<24} {record:>8} {games:>7} "
            f"{t.total_spread:>+7g}"
        )
    return 0


def run_pair(args: argparse.Namespace) -> int:
    snapshot = load_snapshot(args.file)
    config = snapshot.config
    current_round = args.round or snapshot.last_round + 1
    total_rounds = args.rounds or config.num_rounds
    pairing_format = args.format or config.pairing_system

    pairings = generate_pairings(
        snapshot.players,
        pairing_format,
        avoid_rematches=config.avoid_rematches and not args.allow_rematches,
        previous_pairings=snapshot.pairings,
        current_round=current_round,
        total_rounds=total_rounds,
        results=snapshot.results,
        config=config,
    )

    if args.json:
        _emit_json([p.to_dict() for p in pairings])
    else:
        print_pairings(pairings, f"{config.name}: round {current_round} ({pairing_format})")
    return 0


def run_teams(args: argparse.Namespace) -> int:
    snapshot = load_snapshot(args.file)
    current_round = args.round or snapshot.last_round + 1

    # Rosters follow registration order, not rank
    by_id = {
        s.id: s
        for s in calculate_standings(
            snapshot.players, snapshot.pairings, snapshot.results
        )
    }
    result = generate_team_round_robin_pairings(
        [by_id[p.id] for p in snapshot.players], current_round
    )

    if args.json:
        _emit_json(result.to_dict())
        return 0

    by_table = {p.table_number: p for p in result.pairings}
    for matchup in result.team_matchups:
        print_pairings(
            [by_table[t] for t in matchup.tables],
            f"Round {current_round}: {matchup.team1} vs {matchup.team2}",
        )
        print()
    return 0


def run_roster(args: argparse.Namespace) -> int:
    try:
        text = Path(args.file).read_text(encoding="utf-8")
    except OSError as e:
        raise FileLoadException(f"Cannot read roster {args.file}: {e}") from e

    parsed = parse_player_input(text)
    for entry in parsed:
        if not entry.is_valid:
            print(f"skipped {entry.name or '(blank)'}: {entry.error}", file=sys.stderr)

    snapshot = TournamentSnapshot(
        config=TournamentConfig(
            name=args.name,
            team_mode=any(entry.team_name for entry in parsed if entry.is_valid),
        ),
        players=build_players(parsed),
    )
    _emit_json(snapshot.to_dict())
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    common.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    parser = argparse.ArgumentParser(
        prog="tilepairing",
        description="Pair rounds of a Scrabble tournament",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Current standings
  tilepairing standings club-night.json

  # Next round with the configured format
  tilepairing pair club-night.json

  # Round 5 of 7 as King of the Hill, rematches allowed
  tilepairing pair club-night.json --format king-of-hill --round 5 --rounds 7 --allow-rematches

  # Team round 2
  tilepairing teams league.json --round 2

  # Start a snapshot from a pasted roster
  tilepairing roster players.txt --name "Club Night" > club-night.json
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    standings = subparsers.add_parser(
        "standings", parents=[common], help="Print the ranked standings"
    )
    standings.add_argument("file", help="Tournament snapshot (JSON)")
    standings.add_argument(
        "--teams", action="store_true", help="Rank teams instead of players"
    )
    standings.set_defaults(handler=run_standings)

    pair = subparsers.add_parser(
        "pair", parents=[common], help="Print pairings for the next round"
    )
    pair.add_argument("file", help="Tournament snapshot (JSON)")
    pair.add_argument(
        "--format",
        choices=sorted(FORMAT_DESCRIPTIONS),
        help="Pairing format (default: from the snapshot config)",
    )
    pair.add_argument(
        "--round",
        type=positive_int,
        help="Round to pair (default: one after the last paired round)",
    )
    pair.add_argument(
        "--rounds",
        type=positive_int,
        help="Total rounds in the tournament (default: from the snapshot config)",
    )
    pair.add_argument(
        "--allow-rematches",
        action="store_true",
        help="Do not steer players away from opponents already met",
    )
    pair.set_defaults(handler=run_pair)

    teams = subparsers.add_parser(
        "teams", parents=[common], help="Print a team round-robin round"
    )
    teams.add_argument("file", help="Tournament snapshot (JSON)")
    teams.add_argument(
        "--round",
        type=positive_int,
        help="Round to schedule (default: one after the last paired round)",
    )
    teams.set_defaults(handler=run_teams)

    roster = subparsers.add_parser(
        "roster",
        parents=[common],
        help="Build a snapshot from a pasted roster, one 'Name, Rating' per line",
    )
    roster.add_argument("file", help="Roster text file")
    roster.add_argument("--name", default="Untitled Tournament", help="Tournament name")
    roster.set_defaults(handler=run_roster)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_package_level(logging.DEBUG)

    try:
        return args.handler(args)
    except TilePairingException as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
