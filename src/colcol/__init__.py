"""
colcol - Colorize lines of text by the value found in one column.

Lines sharing a column value share a terminal color, which makes log-like
output easy to scan by eye.
"""

__version__ = "0.1.0"
__all__ = ["cli", "core", "commands", "utils"]
