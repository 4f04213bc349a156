"""Core functionality for colcol."""

from .paths import COLCOL_HOME, USER_CONFIG_FILE
from .errors import ColcolError, ConfigError, PaletteError
from .columns import compile_delimiter, split_columns, extract_column
from .palette import ColorAssigner, build_palette, parse_filter

__all__ = [
    "COLCOL_HOME",
    "USER_CONFIG_FILE",
    "ColcolError",
    "ConfigError",
    "PaletteError",
    "compile_delimiter",
    "split_columns",
    "extract_column",
    "ColorAssigner",
    "build_palette",
    "parse_filter",
]
