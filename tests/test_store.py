import unittest

from puzzletracker.tracker.schema import Difficulty, PuzzleSession, difficulty_label, parse_difficulty
from puzzletracker.tracker.store import MAX_SESSIONS, SessionStore


def _session(name: str = "Sudoku", times=(10, 10, 10, 10, 10)) -> PuzzleSession:
    return PuzzleSession(name=name, difficulty=Difficulty.EASY, solved=3, times=tuple(times))


class DifficultyTests(unittest.TestCase):
    def test_labels(self) -> None:
        self.assertEqual(difficulty_label(Difficulty.EASY), "Easy")
        self.assertEqual(difficulty_label(Difficulty.MEDIUM), "Medium")
        self.assertEqual(difficulty_label(Difficulty.HARD), "Hard")
        self.assertEqual(difficulty_label(1), "Easy")
        self.assertEqual(difficulty_label(2), "Medium")
        self.assertEqual(difficulty_label(3), "Hard")

    def test_unknown_codes(self) -> None:
        for value in (0, 4, -1, 99, None, "1", 2.0, True):
            self.assertEqual(difficulty_label(value), "Unknown")

    def test_parse(self) -> None:
        self.assertIs(parse_difficulty(" 2 "), Difficulty.MEDIUM)
        self.assertIs(parse_difficulty(3), Difficulty.HARD)
        self.assertIsNone(parse_difficulty("4"))
        self.assertIsNone(parse_difficulty("hard"))
        self.assertIsNone(parse_difficulty(""))


class SessionTests(unittest.TestCase):
    def test_times_must_have_five_entries(self) -> None:
        with self.assertRaises(ValueError):
            _session(times=(1, 2, 3))

    def test_times_are_required(self) -> None:
        with self.assertRaises(TypeError):
            PuzzleSession(name="Sudoku", difficulty=Difficulty.EASY, solved=1)  # type: ignore[call-arg]

    def test_times_are_stored_as_floats(self) -> None:
        s = PuzzleSession.from_values("Kakuro", 2, 4, [1, 2, 3, 4, 5])
        self.assertEqual(s.times, (1.0, 2.0, 3.0, 4.0, 5.0))
        self.assertIs(s.difficulty, Difficulty.MEDIUM)
        self.assertEqual(s.label, "Medium")


class SessionStoreTests(unittest.TestCase):
    def test_append_and_count(self) -> None:
        store = SessionStore()
        self.assertEqual(store.count(), 0)
        s = _session()
        self.assertTrue(store.append(s))
        self.assertEqual(store.count(), 1)
        self.assertEqual(store.get(0), s)

    def test_append_past_capacity_fails(self) -> None:
        store = SessionStore()
        for i in range(MAX_SESSIONS):
            self.assertTrue(store.append(_session(f"P{i}")))
        self.assertTrue(store.is_full())
        self.assertFalse(store.append(_session("extra")))
        self.assertEqual(store.count(), 5)
        self.assertEqual([s.name for s in store], ["P0", "P1", "P2", "P3", "P4"])

    def test_custom_capacity(self) -> None:
        store = SessionStore(capacity=1)
        self.assertTrue(store.append(_session()))
        self.assertFalse(store.append(_session()))
        self.assertEqual(len(store), 1)

    def test_invalid_capacity(self) -> None:
        with self.assertRaises(ValueError):
            SessionStore(capacity=0)

    def test_average_for_index(self) -> None:
        store = SessionStore()
        store.append(_session(times=(10, 20, 30, 40, 50)))
        self.assertAlmostEqual(store.average_for(0), 30.0)
        self.assertEqual(store.average_for(1), 0.0)
        self.assertEqual(store.average_for(-1), 0.0)

    def test_get_out_of_range(self) -> None:
        with self.assertRaises(IndexError):
            SessionStore().get(0)


if __name__ == "__main__":
    unittest.main()
