"""Command implementations for colcol."""

from . import colorize

__all__ = ["colorize"]
