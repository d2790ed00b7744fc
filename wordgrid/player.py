"""Players: names, scores and hands."""

from __future__ import annotations

from dataclasses import dataclass, field

from .tile import parse_tiles
from .tiles import TileList

HAND_SIZE = 7


class InvalidNameError(ValueError):
    """A player name was rejected."""


def check_name(name: str) -> str:
    """Return ``name`` if it is acceptable, otherwise raise InvalidNameError."""
    if not name:
        raise InvalidNameError("Name cannot be empty")
    if any(c in "0123456789" for c in name):
        raise InvalidNameError("Name cannot contain numbers (sorry X Æ A-12)")
    if any(byte & 0x20 for byte in name.encode("utf-8")):
        raise InvalidNameError("Full name must be in uppercase")
    return name


@dataclass
class Player:
    """A player with a name, a score and a hand of tiles."""

    name: str = ""
    score: int = 0
    hand: TileList = field(default_factory=TileList)
    has_passed: bool = False

    def add_score_for(self, letter: str) -> None:
        """Add the value of the first tile in hand showing ``letter``."""
        for tile in self.hand:
            if tile.letter == letter:
                self.score += tile.value
                return

    def fill_hand(self, bag: TileList) -> None:
        """Draw the opening hand from the front of ``bag``."""
        for _ in range(HAND_SIZE):
            if bag.is_empty():
                break
            self.hand.add_back(bag.draw())

    def load_hand(self, text: str) -> None:
        """Add the tiles written in save-file form to the hand."""
        for tile in parse_tiles(text):
            self.hand.add_back(tile)

    def score_line(self) -> str:
        return f"Score for {self.name}: {self.score}"