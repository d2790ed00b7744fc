"""Letter tiles and their textual form in save files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

TILE_SEPARATOR = ", "


@dataclass(frozen=True)
class Tile:
    """A single letter tile with its point value."""

    letter: str
    value: int

    def __str__(self) -> str:
        return f"{self.letter}-{self.value}"


def parse_tile(text: str) -> Tile:
    """Parse a tile written as ``L-V``, for example ``A-1`` or ``Q-10``."""
    if len(text) < 3 or text[1] != "-":
        raise ValueError(f"malformed tile: {text!r}")
    digits = text[2:]
    if not digits.isdigit():
        raise ValueError(f"malformed tile value: {text!r}")
    return Tile(text[0], int(digits))


def parse_tiles(text: str) -> list[Tile]:
    """Parse a comma separated list of tiles; an empty string gives no tiles."""
    if not text:
        return []
    return [parse_tile(part) for part in text.split(TILE_SEPARATOR)]


def format_tiles(tiles: Iterable[Tile]) -> str:
    """Write tiles in the form read back by :func:`parse_tiles`."""
    return TILE_SEPARATOR.join(str(tile) for tile in tiles)