from __future__ import annotations

"""Session record and difficulty levels."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Sequence, Tuple


TIMES_PER_SESSION = 5


class Difficulty(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3


_LABELS = {
    Difficulty.EASY: "Easy",
    Difficulty.MEDIUM: "Medium",
    Difficulty.HARD: "Hard",
}


def difficulty_label(value: Any) -> str:
    """Return the display label for a difficulty code, or "Unknown"."""
    if isinstance(value, bool) or not isinstance(value, int):
        return "Unknown"
    return _LABELS.get(value, "Unknown")


def parse_difficulty(value: Any) -> Optional[Difficulty]:
    """Convert a typed code ("1".."3" or int) to a Difficulty, None if invalid."""
    try:
        code = int(str(value).strip())
    except ValueError:
        return None
    if code not in _LABELS:
        return None
    return Difficulty(code)


@dataclass(frozen=True)
class PuzzleSession:
    name: str
    difficulty: Difficulty
    solved: int
    times: Tuple[float, ...]

    def __post_init__(self) -> None:
        times = tuple(float(t) for t in self.times)
        if len(times) != TIMES_PER_SESSION:
            raise ValueError(f"a session holds exactly {TIMES_PER_SESSION} times, got {len(times)}")
        object.__setattr__(self, "times", times)

    @classmethod
    def from_values(cls, name: str, difficulty: int, solved: int, times: Sequence[float]) -> "PuzzleSession":
        return cls(name=name, difficulty=Difficulty(difficulty), solved=int(solved), times=tuple(times))

    @property
    def label(self) -> str:
        return difficulty_label(self.difficulty)
