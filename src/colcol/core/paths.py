"""Path constants for colcol."""

from pathlib import Path

COLCOL_HOME = Path.home() / ".colcol"
USER_CONFIG_FILE = COLCOL_HOME / "config.toml"


def init_dirs(config_file: Path = USER_CONFIG_FILE) -> None:
    """Create the directory holding the config file."""
    config_file.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
