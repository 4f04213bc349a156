"""User configuration file support (~/.colcol/config.toml)."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Optional

# tomllib is stdlib from Python 3.11, tomli is the backport
try:
    import tomllib
except ImportError:
    import tomli as tomllib

from ..utils.colors import Colors, c
from .columns import DEFAULT_DELIMITER
from .errors import ConfigError
from .palette import DEFAULT_FILTER
from .paths import USER_CONFIG_FILE, init_dirs

# Built-in defaults, used when neither the command line nor the config file
# sets a value.
DEFAULT_CONFIG = {
    "defaults": {
        "delimiter": DEFAULT_DELIMITER,
        "column": 0,
        "filter": DEFAULT_FILTER,
        "debug": False,
    },
}

_EXPECTED_TYPES = {
    "delimiter": str,
    "column": int,
    "filter": str,
    "debug": bool,
}


def _default_config() -> dict[str, Any]:
    return {"defaults": dict(DEFAULT_CONFIG["defaults"])}


def load_user_config(path: Optional[Path] = None) -> dict[str, Any]:
    """
    Load user configuration from a TOML file.

    Returns the built-in defaults when the file is missing. An unreadable or
    malformed file is reported on stderr and the defaults are used instead.
    """
    config_file = path or USER_CONFIG_FILE
    if not config_file.exists():
        return _default_config()

    try:
        with open(config_file, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        print(c(f"Warning: ignoring config file {config_file}: {exc}", Colors.YELLOW), file=sys.stderr)
        return _default_config()


def get_config_value(config: dict[str, Any], key: str, default: Any = None) -> Any:
    """Get a config value by dot-notation key (e.g., 'defaults.column')."""
    keys = key.split(".")
    value = config
    for k in keys:
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default
    return value


def resolve_option(cli_value: Any, config: dict[str, Any], name: str) -> Any:
    """
    Resolve one option: command line first, then config file, then default.

    Raises:
        ConfigError: if the config file holds a value of the wrong type
    """
    if cli_value is not None:
        return cli_value

    missing = object()
    value = get_config_value(config, f"defaults.{name}", missing)
    if value is missing:
        return DEFAULT_CONFIG["defaults"][name]

    expected = _EXPECTED_TYPES[name]
    # bool is a subclass of int, so reject it explicitly for int fields
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ConfigError(
            f"Config value 'defaults.{name}' must be {expected.__name__}, got {value!r}"
        )
    if name == "column" and value < 0:
        raise ConfigError(f"Config value 'defaults.column' must not be negative, got {value}")
    return value


def create_example_config() -> str:
    """Generate example config file content."""
    return '''# colcol configuration file
# Command line options take precedence over the values below.

[defaults]
# Regular expression separating columns
delimiter = "[ \\t]+"
# Zero-based column used to pick colors
column = 0
# Comma separated 256-color ids never handed out
filter = "8,10,11,16,17,18,19,52,54"
# Print the color id in front of every line
debug = false
'''


def init_user_config(path: Optional[Path] = None) -> bool:
    """
    Write the example config file if none exists yet.

    Returns:
        True if the file exists afterwards, False if it could not be written
    """
    config_file = path or USER_CONFIG_FILE
    if config_file.exists():
        return True

    temp_path = None
    try:
        init_dirs(config_file)
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=config_file.parent,
            delete=False,
            encoding="utf-8",
        ) as temp_file:
            temp_file.write(create_example_config())
            temp_path = Path(temp_file.name)
        os.replace(temp_path, config_file)
        return True
    except OSError:
        if temp_path is not None:
            try:
                temp_path.unlink()
            except OSError:
                pass
        return False
