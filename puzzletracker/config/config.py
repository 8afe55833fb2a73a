from __future__ import annotations

"""Configuration loading and validation for Puzzle Tracker.

This module loads YAML configuration, applies defaults, and checks that
values are sane before the tracker starts.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import sys

import yaml


DEFAULT_MAX_SESSIONS = 5
DEFAULT_REPORT_PATH = "report.txt"
DEFAULT_REPORT_TITLE = "Puzzle Session Report"


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"ERROR: Could not parse config file {path}: {e}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"ERROR: Config file {path} must contain a mapping.", file=sys.stderr)
        sys.exit(1)
    return data


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        return _load_yaml(Path(path))
    return _load_yaml(Path(__file__).with_name("defaults.yml"))


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Unusable values are replaced by their defaults with a warning.
    """
    for section in ("tracker", "report", "ui"):
        if not isinstance(cfg.get(section), dict):
            cfg[section] = {}

    tracker = cfg["tracker"]
    report = cfg["report"]
    ui = cfg["ui"]

    tracker.setdefault("max_sessions", DEFAULT_MAX_SESSIONS)
    report.setdefault("path", DEFAULT_REPORT_PATH)
    report.setdefault("title", DEFAULT_REPORT_TITLE)
    ui.setdefault("show_banner", True)

    max_sessions = tracker.get("max_sessions")
    if isinstance(max_sessions, bool) or not isinstance(max_sessions, int) or max_sessions <= 0:
        print(f"WARNING: Invalid tracker.max_sessions '{max_sessions}', using {DEFAULT_MAX_SESSIONS}.")
        tracker["max_sessions"] = DEFAULT_MAX_SESSIONS

    path = report.get("path")
    if not isinstance(path, str) or not path.strip():
        print(f"WARNING: Invalid report.path '{path}', using '{DEFAULT_REPORT_PATH}'.")
        report["path"] = DEFAULT_REPORT_PATH

    title = report.get("title")
    if not isinstance(title, str):
        print(f"WARNING: Invalid report.title '{title}', using '{DEFAULT_REPORT_TITLE}'.")
        report["title"] = DEFAULT_REPORT_TITLE

    # YAML booleans only; the string "false" would otherwise be truthy
    show_banner = ui.get("show_banner")
    if not isinstance(show_banner, bool):
        print(f"WARNING: Invalid ui.show_banner '{show_banner}', using true.")
        ui["show_banner"] = True
    return cfg
