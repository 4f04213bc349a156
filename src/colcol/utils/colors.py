"""Terminal color utilities."""

from __future__ import annotations

from typing import Optional


class Colors:
    """ANSI color codes for terminal output."""

    YELLOW = "\033[93m"
    RED = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def c(text: str, color: str) -> str:
    """
    Colorize text with ANSI color code.

    Args:
        text: Text to colorize
        color: Color code from Colors class

    Returns:
        Colorized text string
    """
    return f"{color}{text}{Colors.ENDC}"


def color_256(color: int) -> str:
    """Return the ANSI foreground code for a 256-color palette entry."""
    return f"\033[38;5;{color}m"


def render_line(line: str, color: Optional[int], debug: bool = False) -> str:
    """
    Render one output line.

    Args:
        line: Line text, without newline
        color: 256-color id, or None to leave the line uncolored
        debug: Prefix the line with its color id

    Returns:
        The line ready to print
    """
    if color is None:
        return f"  - {line}" if debug else line
    if debug:
        line = f"{color:>3} {line}"
    return c(line, color_256(color))
