import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from puzzletracker import __version__
from puzzletracker.config.settings import TrackerSettings
from puzzletracker.main import main, run_tracker


class CliTests(unittest.TestCase):
    def test_version(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            self.assertEqual(main(["--version"]), 0)
        self.assertEqual(out.getvalue().strip(), f"puzzletracker {__version__}")

    def test_demo(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            self.assertEqual(main(["demo"]), 0)
        text = out.getvalue()
        self.assertIn("Puzzle: Sudoku", text)
        self.assertIn("Hints stored: 1", text)

    def test_run_tracker_with_scripted_ui(self) -> None:
        answers = ["1", "Sudoku", "1", "3", "10", "10", "10", "10", "10", "3", "4"]
        messages = []
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "report.txt"
            settings = TrackerSettings(max_sessions=1, report_path=str(path))
            store = run_tracker(settings, {"ask": lambda _p: answers.pop(0), "inform": messages.append})
            self.assertTrue(path.exists())
        self.assertEqual(store.count(), 1)
        self.assertIn("Welcome to Puzzle Tracker", messages[0])


if __name__ == "__main__":
    unittest.main()
