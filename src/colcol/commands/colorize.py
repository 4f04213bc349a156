"""Colorize command: read lines, pick a color per column value, print."""

from __future__ import annotations

import os
import re
import sys
from typing import BinaryIO, Iterable, Iterator, Optional

from ..core.columns import compile_delimiter, extract_column
from ..core.errors import ConfigError
from ..core.palette import ColorAssigner, build_palette, parse_filter
from ..utils.colors import Colors, c, render_line
from ..utils.lines import STDIN_NAME, iter_lines, open_input


def colorize_lines(
    lines: Iterable[str],
    delimiter: re.Pattern,
    column: int,
    assigner: ColorAssigner,
) -> Iterator[tuple[str, Optional[int]]]:
    """Yield (line, color) for each line, in input order."""
    for line in lines:
        key = extract_column(line, delimiter, column)
        yield line, assigner.assign(key)


def _readable_lines(stream: BinaryIO) -> Iterator[str]:
    """Yield decoded lines, warning about (and skipping) undecodable ones."""
    for result in iter_lines(stream):
        if result.error is not None:
            print(c(f"Warning: failed to read line {result.number}: {result.error}", Colors.YELLOW),
                  file=sys.stderr)
            continue
        yield result.text


def _silence_stdout() -> None:
    """Point stdout at devnull so a closed pipe doesn't fail again at exit."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def cmd_colorize(args) -> int:
    """
    Colorize the input named by args.input.

    Expects resolved options on args: delimiter, column, filter, debug.

    Returns:
        0 on success, 1 if the input can't be read or output is cut off,
        2 on a configuration error
    """
    try:
        delimiter = compile_delimiter(args.delimiter)
        assigner = ColorAssigner(build_palette(parse_filter(args.filter)))
    except ConfigError as exc:
        print(c(f"Error: {exc}", Colors.RED), file=sys.stderr)
        return 2

    try:
        stream = open_input(args.input)
    except OSError as exc:
        print(c(f"Cannot open {args.input}: {exc.strerror or exc}", Colors.RED), file=sys.stderr)
        return 1

    try:
        for line, color in colorize_lines(_readable_lines(stream), delimiter, args.column, assigner):
            try:
                print(render_line(line, color, args.debug), flush=True)
            except BrokenPipeError:
                _silence_stdout()
                return 1
            except OSError as exc:
                print(c(f"Error writing output: {exc}", Colors.RED), file=sys.stderr)
                return 1
    except OSError as exc:
        print(c(f"Error reading {args.input}: {exc}", Colors.RED), file=sys.stderr)
        return 1
    finally:
        if args.input != STDIN_NAME:
            stream.close()

    return 0
