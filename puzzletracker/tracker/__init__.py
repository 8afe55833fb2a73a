from .schema import TIMES_PER_SESSION, Difficulty, PuzzleSession, difficulty_label, parse_difficulty
from .averages import calculate_average_time
from .store import MAX_SESSIONS, SessionStore

__all__ = [
    "TIMES_PER_SESSION",
    "MAX_SESSIONS",
    "Difficulty",
    "PuzzleSession",
    "difficulty_label",
    "parse_difficulty",
    "calculate_average_time",
    "SessionStore",
]
