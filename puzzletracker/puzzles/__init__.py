from .models import (
    COLLECTION_CAPACITY,
    ItemCollection,
    Puzzle,
    PuzzleKind,
    demo_puzzles,
    generic_puzzle,
    logic_puzzle,
    word_puzzle,
)

__all__ = [
    "COLLECTION_CAPACITY",
    "ItemCollection",
    "Puzzle",
    "PuzzleKind",
    "demo_puzzles",
    "generic_puzzle",
    "logic_puzzle",
    "word_puzzle",
]
