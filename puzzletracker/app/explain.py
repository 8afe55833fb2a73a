from __future__ import annotations

"""Explain Mode: one terse console line per tracker milestone.

Turned on by the --explain CLI flag. Lines look like
``[EXPLAIN] session_added :: {"name":"Sudoku",...}``.
"""

import json
from pathlib import Path
from typing import Any, Dict

from ..tracker.averages import calculate_average_time
from ..tracker.schema import PuzzleSession, difficulty_label

TRACKER_STARTED = "tracker_started"
SESSION_ADDED = "session_added"
SESSION_REJECTED = "session_rejected"
REPORT_SAVED = "report_saved"
REPORT_FAILED = "report_failed"

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def session_payload(session: PuzzleSession, stored: int) -> Dict[str, Any]:
    return {
        "name": session.name,
        "difficulty": difficulty_label(session.difficulty),
        "solved": session.solved,
        "avg": round(calculate_average_time(session.times), 2),
        "stored": stored,
    }


def report_payload(path: str | Path, sessions: int) -> Dict[str, Any]:
    return {"path": str(path), "sessions": sessions}


def format_trace(event: str, payload: Dict[str, Any] | None = None) -> str:
    if not payload:
        return f"[EXPLAIN] {event}"
    try:
        data = json.dumps(payload, separators=(",", ":"))
    except (TypeError, ValueError):
        return f"[EXPLAIN] {event}"
    return f"[EXPLAIN] {event} :: {data}"


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if _ENABLED:
        print(format_trace(event, payload))
