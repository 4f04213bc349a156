"""CLI argument parsing and option resolution."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .utils.colors import Colors, c
from .core.errors import ConfigError
from .core.paths import USER_CONFIG_FILE
from .core.user_config import init_user_config, load_user_config, resolve_option
from .commands import colorize


def about_text(config_file: Path) -> str:
    """Describe the tool, including where its config lives."""
    return (
        "Colorize lines from a file, or stdin, by grouping lines according to "
        f"a given delimiter and column. Configuration data is stored in {config_file}"
    )


def non_negative_int(value: str) -> int:
    """argparse type for a zero-based index."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid column index: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"column index must not be negative: {number}")
    return number


def create_parser(about: str) -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="colcol",
        description=about,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
{c('Examples:', Colors.BOLD)}
  tail -f app.log | colcol -c 2         # color by the third column
  colcol -d ',' -c 1 data.csv           # comma separated input
  colcol -f '' --debug access.log       # use every color, show color ids

{c('Config:', Colors.BOLD)}
  colcol --init-config                  # write an example config file
        """,
    )

    parser.add_argument("input", nargs="?", default="-", metavar="INPUT",
                        help="Input file to colorize. Defaults to stdin.")
    parser.add_argument("--delimiter", "-d", help="The column delimiter to use (regex, default: '[ \\t]+')")
    parser.add_argument("--column", "-c", type=non_negative_int,
                        help="Which column to utilize for colorization (default: 0)")
    parser.add_argument("--filter", "-f",
                        help="Comma separated color ids to never use (default: 8,10,11,16,17,18,19,52,54)")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Print the color id in front of each line",
    )
    parser.add_argument(
        "--no-debug",
        action="store_false",
        dest="debug",
        help="Don't print color ids, even if the config asks for it",
    )
    parser.add_argument("--config", type=Path, help="Read configuration from this file")
    parser.add_argument("--init-config", action="store_true",
                        help="Write an example config file (if missing) and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser(about_text(USER_CONFIG_FILE))
    args = parser.parse_args(argv)

    config_file = args.config or USER_CONFIG_FILE

    if args.init_config:
        if not init_user_config(config_file):
            print(c(f"Could not write config file {config_file}", Colors.RED), file=sys.stderr)
            return 1
        print(config_file)
        return 0

    # First run: store the defaults where the user can find and edit them
    if args.config is None:
        init_user_config(config_file)

    user_config = load_user_config(config_file)

    # Apply user config defaults
    try:
        for name in ("delimiter", "column", "filter", "debug"):
            setattr(args, name, resolve_option(getattr(args, name), user_config, name))
    except ConfigError as exc:
        print(c(f"Error: {exc}", Colors.RED), file=sys.stderr)
        return 2

    return colorize.cmd_colorize(args)


if __name__ == "__main__":
    sys.exit(main())
