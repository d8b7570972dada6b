"""
CLI entry point.

    mostle seed [--file puzzle.yaml] [--db-url URL]
    mostle today [--json] [--db-url URL]
    mostle serve [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from mostle.application.services.daily_puzzle_provider import DailyPuzzleProvider
from mostle.application.services.puzzle_seeder import PuzzleSeeder
from mostle.domain.errors import PuzzleNotFound
from mostle.domain.puzzle import DailyPuzzle, metrics_for_puzzle
from mostle.infrastructure.stores.puzzle_store import PuzzleStore
from mostle.utils.logging_config import LogFiles, Logger

# Load local .env automatically so MOSTLE_DB_URL applies to CLI commands.
load_dotenv(find_dotenv(usecwd=True), override=False)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mostle",
        description="Mostle - daily ranking puzzle",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    seed_parser = subparsers.add_parser("seed", help="Create today's puzzle if missing")
    seed_parser.add_argument("--file", "-f", help="YAML puzzle definition (defaults to sample data)")
    seed_parser.add_argument("--db-url", help="Database URL (default: MOSTLE_DB_URL)")

    today_parser = subparsers.add_parser("today", help="Show today's puzzle")
    today_parser.add_argument("--json", action="store_true", help="Print the API payload")
    today_parser.add_argument("--db-url", help="Database URL (default: MOSTLE_DB_URL)")

    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true")

    return parser


def load_puzzle_file(path: str) -> Dict[str, Any]:
    with open(Path(path), "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict) or "theme" not in data or "objects" not in data:
        raise ValueError(f"Puzzle file must define 'theme' and 'objects': {path}")
    return data


def render_puzzle(puzzle: DailyPuzzle) -> str:
    lines = [f"{puzzle.theme} ({puzzle.date.isoformat()})", ""]
    lines.append("Metrics:")
    for metric in metrics_for_puzzle(puzzle):
        lines.append(f"  - {metric.label}: {metric.hint}")
    lines.append("")
    lines.append("Objects:")
    for obj in puzzle.objects:
        lines.append(f"  - {obj.name}")
    return "\n".join(lines)


def _run_seed(args: argparse.Namespace) -> int:
    payload: Optional[Dict[str, Any]] = load_puzzle_file(args.file) if args.file else None
    store = PuzzleStore(db_url=args.db_url)
    created, puzzle = PuzzleSeeder(store).seed_today(payload)
    if created:
        Logger.info(f"Seeded puzzle {puzzle.id} ({puzzle.theme})", file=LogFiles.SEED)
        print(f"Seeded: {puzzle.theme} for {puzzle.date.isoformat()}")
    else:
        print("Seed skipped: today's game already exists.")
    return 0


def _run_today(args: argparse.Namespace) -> int:
    provider = DailyPuzzleProvider(PuzzleStore(db_url=args.db_url))
    try:
        puzzle = provider.get_today()
    except PuzzleNotFound as e:
        print(e.message, file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(puzzle.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(render_puzzle(puzzle))
    return 0


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("mostle.api.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def run_cli(argv: Optional[list[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "seed":
        return _run_seed(args)
    if args.command == "today":
        return _run_today(args)
    if args.command == "serve":
        return _run_serve(args)

    parser.print_help()
    return 1


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
