from __future__ import annotations

"""Capacity-bounded, append-only store for puzzle sessions."""

from typing import Iterator, List

from .averages import calculate_average_time
from .schema import PuzzleSession


MAX_SESSIONS = 5


class SessionStore:
    def __init__(self, capacity: int = MAX_SESSIONS) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = int(capacity)
        self._sessions: List[PuzzleSession] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, session: PuzzleSession) -> bool:
        """Store a session; False once the store is full."""
        if self.is_full():
            return False
        self._sessions.append(session)
        return True

    def count(self) -> int:
        return len(self._sessions)

    def is_full(self) -> bool:
        return len(self._sessions) >= self._capacity

    def get(self, index: int) -> PuzzleSession:
        if index < 0 or index >= len(self._sessions):
            raise IndexError(f"no session at index {index}")
        return self._sessions[index]

    def average_for(self, index: int) -> float:
        """Average time of the session at index, 0.0 when out of range."""
        if index < 0 or index >= len(self._sessions):
            return 0.0
        return calculate_average_time(self._sessions[index].times)

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[PuzzleSession]:
        return iter(list(self._sessions))
