from .shell import TrackerShell, terminal_ui

__all__ = ["TrackerShell", "terminal_ui"]
