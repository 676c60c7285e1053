"""Display layer exports."""

from .formatter import decorate_status, render, render_columns
from .renderer import TerminalRenderer, align_columns, drive

__all__ = [
    "TerminalRenderer",
    "align_columns",
    "decorate_status",
    "drive",
    "render",
    "render_columns",
]
