# Area: Shared
"""
bowling_scorer.cli — Command-line interface
===========================================

Provides the CLI entry point for keeping score.

Usage:
    python -m bowling_scorer new Alice Bob          # Start a match
    python -m bowling_scorer roll MATCH_ID 7        # Record a roll
    python -m bowling_scorer show MATCH_ID          # Print the score card
    python -m bowling_scorer list                   # Recent matches
    python -m bowling_scorer delete MATCH_ID        # Remove a match

The database path can be set via:
    1. CLI flag: --db
    2. Config file key: db_path
    3. Environment variable (or .env): BOWLING_DB_PATH
"""

import argparse
import sys
from typing import List, Optional

from ._config import load_config, log_level, validate_config
from ._shared.logging_config import setup_logging
from ._storage.database import init_database
from ._storage.repo_matches import MatchRepository
from .errors import MatchNotFoundError
from .scoreboard import render_scoreboard
from .service import ScoringService


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="bowling_scorer",
        description="Ten-pin bowling score keeper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m bowling_scorer new Alice Bob
  python -m bowling_scorer roll 3f9a1c2b4d5e 10
  python -m bowling_scorer --db league.db show 3f9a1c2b4d5e
        """,
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--db", type=str, help="Path to the SQLite database")

    commands = parser.add_subparsers(dest="command", required=True)

    new = commands.add_parser("new", help="Start a new match")
    new.add_argument("players", nargs="+", help="Player names in turn order")

    roll = commands.add_parser("roll", help="Record pins for the current player")
    roll.add_argument("match_id")
    roll.add_argument("pins", type=int)

    show = commands.add_parser("show", help="Print the score card")
    show.add_argument("match_id")

    commands.add_parser("list", help="List recent matches")

    delete = commands.add_parser("delete", help="Delete a match")
    delete.add_argument("match_id")

    return parser.parse_args(argv)


def build_service(args: argparse.Namespace) -> ScoringService:
    """Load config, set up logging and open the database."""
    config = load_config(args.config)
    if args.db:
        config["db_path"] = args.db
    validate_config(config)

    setup_logging(config["log_file"], log_level(config))
    init_database(config["db_path"])
    return ScoringService(MatchRepository(config["db_path"]))


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    try:
        service = build_service(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "new":
        try:
            match_id = service.create_match(args.players)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(match_id)
        return 0

    if args.command == "roll":
        result = service.submit_roll(args.match_id, args.pins)
        if not result.success:
            print(f"Error: {result.error}", file=sys.stderr)
            return 1
        if result.finished:
            print("Match finished")
        else:
            print(f"Up next: {result.current_player}")
        return 0

    if args.command == "list":
        for summary in service.list_matches():
            print(
                f"{summary['id']}  {summary['status']:<9}  "
                f"{summary['start_time']}  {summary['players'] or '-'}"
            )
        return 0

    try:
        if args.command == "show":
            print(render_scoreboard(service.get_match(args.match_id)))
        elif args.command == "delete":
            service.delete_match(args.match_id)
            print(f"Deleted {args.match_id}")
    except MatchNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
