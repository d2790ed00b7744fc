"""Ordered collections of tiles: the tile bag and players' hands."""

from __future__ import annotations

import random
import re
from os import PathLike
from typing import Iterable, Iterator

from .tile import Tile, parse_tiles

RESET = "\033[0m"
_VALUE = re.compile(r"\s*([+-]?\d+)")


class TileList:
    """An ordered list of tiles, drawn from the front and added at the back."""

    def __init__(self, tiles: Iterable[Tile] = (), colour: int = 0) -> None:
        self._tiles: list[Tile] = list(tiles)
        self.colour = colour

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __repr__(self) -> str:
        return f"TileList({self._tiles!r}, colour={self.colour})"

    def clear(self) -> None:
        """Remove every tile."""
        self._tiles.clear()

    def draw(self) -> Tile:
        """Remove and return the tile at the front."""
        if not self._tiles:
            raise IndexError("draw from an empty tile list")
        return self._tiles.pop(0)

    def take(self, letter: str) -> Tile:
        """Remove and return the first tile showing ``letter``."""
        for index, tile in enumerate(self._tiles):
            if tile.letter == letter:
                return self._tiles.pop(index)
        raise KeyError(letter)

    def tile_at(self, index: int) -> Tile:
        """Return the tile at ``index`` counted from the front."""
        if not 0 <= index < len(self._tiles):
            raise IndexError(f"tile index out of range: {index}")
        return self._tiles[index]

    def contains(self, letter: str) -> bool:
        return any(tile.letter == letter for tile in self._tiles)

    def count(self, letter: str) -> int:
        return sum(1 for tile in self._tiles if tile.letter == letter)

    def add_back(self, tile: Tile) -> None:
        self._tiles.append(tile)

    def remove(self, letter: str) -> None:
        """Remove the first tile showing ``letter``, if there is one."""
        for index, tile in enumerate(self._tiles):
            if tile.letter == letter:
                del self._tiles[index]
                return

    def render(self) -> str:
        """Return the hand as shown to a player, in the list's colour."""
        if not self._tiles:
            return "List empty!\n"
        *rest, last = self._tiles
        body = "".join(f"\033[{self.colour}m{tile}, " for tile in rest)
        return f"\nYour hand is\n{body}{last}{RESET}\n\n"

    def is_empty(self) -> bool:
        return not self._tiles

    @classmethod
    def from_saved(cls, text: str) -> "TileList":
        """Build a list from the comma separated form used in save files."""
        return cls(parse_tiles(text))

    @classmethod
    def new_bag(
        cls, path: str | PathLike[str], rng: random.Random | None = None
    ) -> "TileList":
        """Read a tile definition file (letter then value per line) and shuffle it."""
        tiles = []
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                line = line.rstrip("\r\n")
                if not line:
                    continue
                match = _VALUE.match(line[1:4])
                if match is None:
                    raise ValueError(f"malformed tile line: {line!r}")
                tiles.append(Tile(line[0], int(match.group(1))))
        (rng or random.Random()).shuffle(tiles)
        return cls(tiles)