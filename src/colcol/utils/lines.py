"""Line source: read lines from a file or stdin, one decode per line."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, Iterator, NamedTuple, Optional, Union

STDIN_NAME = "-"


class LineResult(NamedTuple):
    """A line read from the input, or the error that stopped it decoding."""

    number: int
    text: Optional[str]
    error: Optional[Exception] = None


def open_input(path: Union[str, Path]) -> BinaryIO:
    """
    Open the input for reading in binary mode.

    "-" means stdin. Raises OSError when the file can't be opened.
    """
    if str(path) == STDIN_NAME:
        return sys.stdin.buffer
    return open(path, "rb")


def iter_lines(stream: BinaryIO, encoding: str = "utf-8") -> Iterator[LineResult]:
    """
    Yield each line of a binary stream, newline stripped.

    Lines are decoded one at a time, so a line that isn't valid text is
    reported as an error without ending the iteration.
    """
    for number, raw in enumerate(stream, 1):
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        try:
            yield LineResult(number, raw.decode(encoding))
        except UnicodeDecodeError as exc:
            yield LineResult(number, None, exc)
