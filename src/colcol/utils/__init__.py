"""Utility modules for colcol."""

from .colors import Colors, c, color_256, render_line
from .lines import LineResult, open_input, iter_lines

__all__ = [
    "Colors", "c", "color_256", "render_line",
    "LineResult", "open_input", "iter_lines",
]
