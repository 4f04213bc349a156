"""Column extraction: split a line by a delimiter regex and pick one token."""

from __future__ import annotations

import re
from typing import Optional

from .errors import ConfigError

DEFAULT_DELIMITER = "[ \t]+"


def compile_delimiter(pattern: str) -> re.Pattern:
    """
    Compile a delimiter pattern.

    Raises:
        ConfigError: if the pattern is not a valid regular expression
    """
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigError(f"Invalid delimiter pattern {pattern!r}: {exc}") from exc


def split_columns(line: str, delimiter: re.Pattern) -> list[str]:
    """
    Split a line on every match of the delimiter.

    Unlike re.split, capturing groups in the pattern never show up as tokens.
    """
    if not line:
        return [""]

    tokens = []
    start = 0
    for match in delimiter.finditer(line):
        tokens.append(line[start:match.start()])
        start = match.end()
    tokens.append(line[start:])
    return tokens


def extract_column(line: str, delimiter: re.Pattern, column: int) -> Optional[str]:
    """
    Return the token at a zero-based column index.

    Args:
        line: Line of text, without its trailing newline
        delimiter: Compiled delimiter pattern
        column: Zero-based column index

    Returns:
        The token, or None if the line has no such column
    """
    tokens = split_columns(line, delimiter)
    if column < 0 or column >= len(tokens):
        return None
    return tokens[column]
