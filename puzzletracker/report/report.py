from __future__ import annotations

"""Fixed-width session report for the console or a text file."""

import sys
from pathlib import Path
from typing import Callable, Iterable, List, TextIO

from ..tracker.averages import calculate_average_time
from ..tracker.schema import PuzzleSession


DEFAULT_TITLE = "Puzzle Session Report"
NAME_WIDTH = 15
SOLVED_WIDTH = 10
AVG_WIDTH = 15
# header label sits one column left of the value column
AVG_HEADER_WIDTH = AVG_WIDTH - 1


def format_header() -> str:
    return f"{'Puzzle':>{NAME_WIDTH}}{'Solved':>{SOLVED_WIDTH}}{'Avg Time':>{AVG_HEADER_WIDTH}}"


def format_row(session: PuzzleSession) -> str:
    avg = calculate_average_time(session.times)
    return f"{session.name:>{NAME_WIDTH}}{session.solved:>{SOLVED_WIDTH}}{avg:>{AVG_WIDTH}.2f}"


def format_report(sessions: Iterable[PuzzleSession]) -> List[str]:
    """Return the header line followed by one line per session."""
    return [format_header()] + [format_row(s) for s in sessions]


def render_report(sessions: Iterable[PuzzleSession], title: str = DEFAULT_TITLE) -> str:
    lines = [title] + format_report(sessions)
    return "\n".join(lines) + "\n"


def write_report(stream: TextIO, sessions: Iterable[PuzzleSession], title: str = DEFAULT_TITLE) -> None:
    stream.write(render_report(sessions, title))


def show_report(sessions: Iterable[PuzzleSession], out: TextIO | None = None, title: str = DEFAULT_TITLE) -> None:
    out = out or sys.stdout
    out.write("\n")
    write_report(out, sessions, title)


def save_report(
    sessions: Iterable[PuzzleSession],
    path: str | Path,
    title: str = DEFAULT_TITLE,
    inform: Callable[[str], None] = print,
) -> bool:
    """Overwrite path with the rendered report.

    The report is rendered and encoded before the file is opened, so an
    undecodable name read from the terminal cannot fail half way through a
    write. On failure to open the file the error goes to ``inform`` and
    nothing is written.
    """
    data = render_report(sessions, title).encode("utf-8", errors="replace")
    try:
        with Path(path).open("wb") as f:
            f.write(data)
    except OSError:
        inform("Error opening file.")
        return False
    return True
