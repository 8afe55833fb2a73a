from __future__ import annotations

"""CLI entry point for Puzzle Tracker."""

import argparse
import sys
from typing import Callable, Dict, List, Optional

from . import __version__
from .app import explain
from .app.shell import TrackerShell, terminal_ui
from .config.config import load_config, validate_config
from .config.settings import TrackerSettings
from .puzzles.models import demo_puzzles
from .tracker.store import SessionStore


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="puzzletracker", description="Puzzle Tracker CLI")
    p.add_argument("--config", type=str, default=None, help="Path to YAML config")
    p.add_argument("--explain", action="store_true", help="Trace tracker milestones")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("run", help="Record sessions interactively (default)")
    sub.add_parser("demo", help="Print the logic and word puzzle examples")
    return p.parse_args(argv)


def run_tracker(settings: TrackerSettings, ui: Optional[Dict[str, Callable]] = None) -> SessionStore:
    store = SessionStore(settings.max_sessions)
    shell = TrackerShell(
        store,
        ui or terminal_ui(),
        report_path=settings.report_path,
        report_title=settings.report_title,
    )
    if settings.show_banner:
        shell.show_banner()
    shell.run()
    return store


def run_demo() -> None:
    for puzzle in demo_puzzles():
        print(puzzle.describe())


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.version:
        print(f"puzzletracker {__version__}")
        return 0

    if args.explain:
        explain.enable(True)

    if args.cmd == "demo":
        run_demo()
        return 0

    settings = TrackerSettings.from_config(validate_config(load_config(args.config)))
    explain.trace(explain.TRACKER_STARTED, settings.model_dump())
    run_tracker(settings)
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
