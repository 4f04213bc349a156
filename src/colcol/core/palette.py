"""Color assignment: a stable color per key, drawn from a shrinking palette."""

from __future__ import annotations

from typing import Iterable, Optional

from .errors import ConfigError, PaletteError

ColorId = int

COLOR_ID_MAX = 255
PALETTE_LOW = 1
PALETTE_HIGH = 254
DEFAULT_FILTER = "8,10,11,16,17,18,19,52,54"


def parse_filter(text: str) -> list[ColorId]:
    """
    Parse a comma separated list of color ids, e.g. "8,10,11".

    A blank string means no colors are filtered.

    Raises:
        ConfigError: if an entry is not an integer in 0..255
    """
    if not text.strip():
        return []

    ids = []
    for entry in text.split(","):
        entry = entry.strip()
        try:
            color = int(entry)
        except ValueError:
            raise ConfigError(f"Invalid color id in filter: {entry!r}") from None
        if not 0 <= color <= COLOR_ID_MAX:
            raise ConfigError(f"Color id out of range 0-{COLOR_ID_MAX} in filter: {color}")
        ids.append(color)
    return ids


def build_palette(
    filter_ids: Iterable[ColorId] = (),
    low: ColorId = PALETTE_LOW,
    high: ColorId = PALETTE_HIGH,
) -> list[ColorId]:
    """
    Build the initial palette: low..high (inclusive) minus the filtered ids.

    Raises:
        PaletteError: if every color in the range is filtered out
    """
    excluded = set(filter_ids)
    palette = [color for color in range(low, high + 1) if color not in excluded]
    if not palette:
        raise PaletteError(f"Filter excludes every color in {low}-{high}, nothing left to assign")
    return palette


class ColorAssigner:
    """
    Hands out one color per distinct key.

    New keys take the first color of the palette, and that color is spent.
    The last color is never spent: once it is the only one left, every new
    key gets it but is not remembered, so the palette can't run dry.
    """

    def __init__(self, palette: Iterable[ColorId]):
        self.palette: list[ColorId] = list(dict.fromkeys(palette))
        if not self.palette:
            raise PaletteError("Palette must hold at least one color")
        self.colors: dict[str, ColorId] = {}

    def assign(self, key: Optional[str]) -> Optional[ColorId]:
        """Return the color for key, or None when there is no key."""
        if key is None:
            return None

        color = self.colors.get(key)
        if color is not None:
            return color

        color = self.palette[0]
        if len(self.palette) > 1:
            del self.palette[0]
            self.colors[key] = color
        return color
