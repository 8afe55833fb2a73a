from __future__ import annotations

"""Puzzle kinds demo: a closed set of tagged variants.

A puzzle is generic, logic or word. Logic puzzles count clues used and
store tools; word puzzles count words found and store hints. Both keep their
strings in a small bounded collection.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ..tracker.schema import Difficulty, difficulty_label


COLLECTION_CAPACITY = 5


class ItemCollection:
    def __init__(self, capacity: int = COLLECTION_CAPACITY) -> None:
        self._capacity = int(capacity)
        self._items: List[str] = []

    def add(self, item: str) -> bool:
        if len(self._items) >= self._capacity:
            return False
        self._items.append(item)
        return True

    def count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def items(self) -> List[str]:
        return list(self._items)


class PuzzleKind(str, Enum):
    GENERIC = "generic"
    LOGIC = "logic"
    WORD = "word"


_TYPE_LABELS = {
    PuzzleKind.GENERIC: "Generic Puzzle",
    PuzzleKind.LOGIC: "Logic Puzzle",
    PuzzleKind.WORD: "Word Puzzle",
}

# (counter line, collection line) per kind; generic has no extras
_EXTRA_LINES = {
    PuzzleKind.LOGIC: ("Clues Used", "Tools stored"),
    PuzzleKind.WORD: ("Words Found", "Hints stored"),
}


@dataclass
class Puzzle:
    kind: PuzzleKind = PuzzleKind.GENERIC
    name: str = "Unknown"
    difficulty: Difficulty = Difficulty.EASY
    duration: int = 0
    counter: int = 0
    collection: ItemCollection = field(default_factory=ItemCollection)

    def type_label(self) -> str:
        return _TYPE_LABELS[self.kind]

    @property
    def clues_used(self) -> int:
        return self.counter if self.kind is PuzzleKind.LOGIC else 0

    @property
    def words_found(self) -> int:
        return self.counter if self.kind is PuzzleKind.WORD else 0

    def add_tool(self, tool: str) -> None:
        """Store a solving tool; ignored past capacity or on non-logic puzzles."""
        if self.kind is PuzzleKind.LOGIC:
            self.collection.add(tool)

    def add_hint(self, hint: str) -> None:
        """Store a word hint; ignored past capacity or on non-word puzzles."""
        if self.kind is PuzzleKind.WORD:
            self.collection.add(hint)

    def describe(self) -> str:
        lines = [
            f"Puzzle: {self.name}",
            f"Difficulty: {difficulty_label(self.difficulty)}",
            f"Duration: {self.duration} minutes",
        ]
        extra = _EXTRA_LINES.get(self.kind)
        if extra is not None:
            counter_label, stored_label = extra
            lines.append(f"{counter_label}: {self.counter}")
            lines.append(f"{stored_label}: {self.collection.count()}")
        return "\n".join(lines)


def generic_puzzle(name: str = "Unknown", difficulty: Difficulty = Difficulty.EASY, duration: int = 0) -> Puzzle:
    return Puzzle(PuzzleKind.GENERIC, name, difficulty, duration)


def logic_puzzle(
    name: str = "Logic", difficulty: Difficulty = Difficulty.EASY, duration: int = 0, clues_used: int = 0
) -> Puzzle:
    return Puzzle(PuzzleKind.LOGIC, name, difficulty, duration, counter=clues_used)


def word_puzzle(
    name: str = "Word", difficulty: Difficulty = Difficulty.EASY, duration: int = 0, words_found: int = 0
) -> Puzzle:
    return Puzzle(PuzzleKind.WORD, name, difficulty, duration, counter=words_found)


def demo_puzzles() -> List[Puzzle]:
    sudoku = logic_puzzle("Sudoku", Difficulty.MEDIUM, 25, clues_used=3)
    sudoku.add_tool("Grid Notes")
    crossword = word_puzzle("Crossword", Difficulty.HARD, 40, words_found=15)
    crossword.add_hint("Dictionary")
    return [sudoku, crossword]
