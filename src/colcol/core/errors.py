"""Exceptions raised while setting up a colorize run."""

from __future__ import annotations


class ColcolError(Exception):
    """Base class for colcol errors."""


class ConfigError(ColcolError, ValueError):
    """An option or config value cannot be used (bad regex, bad filter...)."""


class PaletteError(ConfigError):
    """The palette has no colors left to hand out."""
