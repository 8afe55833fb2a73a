from __future__ import annotations

"""Typed tracker settings using Pydantic."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .config import DEFAULT_MAX_SESSIONS, DEFAULT_REPORT_PATH, DEFAULT_REPORT_TITLE


class TrackerSettings(BaseModel):
    """Settings the interactive tracker runs with.

    - max_sessions: store capacity (>0)
    - report_path: file the save-report menu entry overwrites
    - report_title: first line of every rendered report
    - show_banner: print the welcome banner on start
    """

    max_sessions: int = Field(DEFAULT_MAX_SESSIONS, gt=0)
    report_path: str = Field(DEFAULT_REPORT_PATH, min_length=1)
    report_title: str = DEFAULT_REPORT_TITLE
    show_banner: bool = True

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "TrackerSettings":
        return cls(
            max_sessions=cfg["tracker"]["max_sessions"],
            report_path=cfg["report"]["path"],
            report_title=cfg["report"]["title"],
            show_banner=cfg["ui"]["show_banner"],
        )
