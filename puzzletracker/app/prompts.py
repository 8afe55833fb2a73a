from __future__ import annotations

"""Re-prompting input loops for session fields.

Each helper keeps asking through ``ask`` until the answer is acceptable.
End of input (EOFError) propagates to the caller.
"""

import math
from typing import Callable, Optional

from ..tracker.schema import Difficulty, parse_difficulty

Ask = Callable[[str], str]
Inform = Callable[[str], None]


def ask_name(ask: Ask) -> str:
    name = ask("Enter puzzle name: ").strip()
    while not name:
        name = ask("Puzzle name cannot be empty. Try again: ").strip()
    return name


def ask_difficulty(ask: Ask) -> Difficulty:
    while True:
        level = parse_difficulty(ask("Difficulty (1=Easy, 2=Medium, 3=Hard): "))
        if level is not None:
            return level


def _positive_int(raw: str) -> Optional[int]:
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value > 0 else None


def _positive_float(raw: str) -> Optional[float]:
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value if value > 0 else None


def ask_solved(ask: Ask) -> int:
    while True:
        value = _positive_int(ask("Number of puzzles solved: "))
        if value is not None:
            return value


def ask_time(ask: Ask, index: int) -> float:
    while True:
        value = _positive_float(ask(f"Enter time for puzzle {index + 1}: "))
        if value is not None:
            return value


def ask_choice(ask: Ask) -> Optional[int]:
    """Read a menu choice; None when the answer is not a number."""
    try:
        return int(ask("Enter choice: ").strip())
    except ValueError:
        return None
