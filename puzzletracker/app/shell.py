from __future__ import annotations

"""Interactive menu for recording sessions and producing reports.

The shell is front-end agnostic: it talks to the user only through the
``ask`` and ``inform`` callbacks of a ui mapping, so the terminal and tests
drive it the same way.
"""

import io
from pathlib import Path
from typing import Callable, Dict

from ..report.report import DEFAULT_TITLE, save_report, show_report
from ..tracker.schema import TIMES_PER_SESSION, PuzzleSession
from ..tracker.store import SessionStore
from .explain import (
    REPORT_FAILED,
    REPORT_SAVED,
    SESSION_ADDED,
    SESSION_REJECTED,
    report_payload,
    session_payload,
    trace as xtrace,
)
from .prompts import ask_choice, ask_difficulty, ask_name, ask_solved, ask_time


ADD_SESSION = 1
VIEW_REPORT = 2
SAVE_REPORT = 3
EXIT = 4

BANNER = (
    "=====================================\n"
    "        Welcome to Puzzle Tracker\n"
    "====================================="
)

MENU = (
    "\nMenu\n"
    "1. Add Puzzle Session\n"
    "2. View Report\n"
    "3. Save Report to File\n"
    "4. Exit"
)


def terminal_ui() -> Dict[str, Callable]:
    def ask(prompt: str) -> str:
        return input(prompt)

    def inform(msg: str) -> None:
        print(msg)

    return {"ask": ask, "inform": inform}


class TrackerShell:
    def __init__(
        self,
        store: SessionStore,
        ui: Dict[str, Callable],
        *,
        report_path: str | Path = "report.txt",
        report_title: str = DEFAULT_TITLE,
    ) -> None:
        self.store = store
        self.ask = ui["ask"]
        self.inform = ui["inform"]
        self.report_path = Path(report_path)
        self.report_title = report_title

    def show_banner(self) -> None:
        self.inform(BANNER)

    def add_session(self) -> bool:
        if self.store.is_full():
            self.inform("Maximum number of sessions reached.")
            return False

        name = ask_name(self.ask)
        level = ask_difficulty(self.ask)
        solved = ask_solved(self.ask)
        times = tuple(ask_time(self.ask, i) for i in range(TIMES_PER_SESSION))

        session = PuzzleSession(name=name, difficulty=level, solved=solved, times=times)
        added = self.store.append(session)
        xtrace(SESSION_ADDED if added else SESSION_REJECTED, session_payload(session, self.store.count()))
        return added

    def show_report(self) -> None:
        buf = io.StringIO()
        show_report(self.store, out=buf, title=self.report_title)
        self.inform(buf.getvalue().rstrip("\n"))

    def save_report(self) -> bool:
        ok = save_report(self.store, self.report_path, title=self.report_title, inform=self.inform)
        xtrace(REPORT_SAVED if ok else REPORT_FAILED, report_payload(self.report_path, self.store.count()))
        return ok

    def dispatch(self, choice: int | None) -> bool:
        """Handle one menu choice; False when the loop should stop."""
        if choice == ADD_SESSION:
            self.add_session()
        elif choice == VIEW_REPORT:
            self.show_report()
        elif choice == SAVE_REPORT:
            self.save_report()
        elif choice == EXIT:
            self.inform("Exiting program.")
            return False
        else:
            self.inform("Invalid choice.")
        return True

    def run(self) -> None:
        running = True
        while running:
            self.inform(MENU)
            try:
                running = self.dispatch(ask_choice(self.ask))
            except EOFError:
                self.inform("\nExiting program.")
                running = False
