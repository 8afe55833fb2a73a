from .report import (
    DEFAULT_TITLE,
    format_header,
    format_report,
    format_row,
    render_report,
    save_report,
    show_report,
    write_report,
)

__all__ = [
    "DEFAULT_TITLE",
    "format_header",
    "format_report",
    "format_row",
    "render_report",
    "save_report",
    "show_report",
    "write_report",
]
