"""The playing board: placing tiles and checking the words they form."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import takewhile
from os import PathLike
from typing import Iterable, Iterator, Sequence

EMPTY = " "
GREEN = "\033[32m"
RESET = "\033[0m"

FIRST_ROW = 2
"""Index of the first lettered row; the rows above it are the column header."""
LAST_COLUMN = 15
SAVE_BOARD_START = 6
SAVE_BOARD_END = 23


class PlacementError(ValueError):
    """A tile placement was rejected; the board is left as it was."""


@dataclass(frozen=True)
class Placement:
    """A tile letter to be put at a row letter and column number."""

    letter: str
    row: str
    column: int

    def __str__(self) -> str:
        return f"{self.letter}-{self.row}{self.column}"


def parse_placement(text: str) -> Placement:
    """Parse a move of the form ``L-R<col>``, for example ``A-H7`` or ``B-C10``."""
    if len(text) < 4 or text[1] != "-":
        raise PlacementError(f"Malformed placement: {text!r}")
    digits = text[3:5] if len(text) == 5 else text[3]
    if not (digits.isascii() and digits.isdigit()):
        raise PlacementError("Outside of board area (x-axis)")
    return Placement(text[0], text[2], int(digits))


def load_dictionary(path: str | PathLike[str]) -> frozenset[str]:
    """Read a word list, one word per line, in upper case."""
    with open(path, encoding="utf-8") as handle:
        return frozenset(line.rstrip("\r\n").upper() for line in handle)


def _filled(cell: str) -> bool:
    return cell != EMPTY


def _run(cells: Iterator[str]) -> str:
    return "".join(takewhile(_filled, cells))


def _as_placement(move: Placement | str) -> Placement:
    return move if isinstance(move, Placement) else parse_placement(move)


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


class Board:
    """A grid of text rows; tile cells sit every fourth character from column 4."""

    def __init__(self, rows: Iterable[str], dictionary: Iterable[str] = ()) -> None:
        self._rows: list[str] = list(rows)
        self.dictionary = frozenset(word.upper() for word in dictionary)
        self.current_player = ""
        self.started = False

    @property
    def rows(self) -> list[str]:
        return list(self._rows)

    @classmethod
    def from_file(
        cls, path: str | PathLike[str], dictionary: Iterable[str] = ()
    ) -> "Board":
        """Read an empty board layout from a text file."""
        with open(path, encoding="utf-8") as handle:
            return cls((line.rstrip("\r\n") for line in handle), dictionary)

    @classmethod
    def from_save(cls, lines: Sequence[str], dictionary: Iterable[str] = ()) -> "Board":
        """Take the board rows out of the lines of a save file."""
        if len(lines) < SAVE_BOARD_END:
            raise ValueError("save file is too short to hold a board")
        board = cls(lines[SAVE_BOARD_START:SAVE_BOARD_END], dictionary)
        if not board.is_empty():
            board.mark_started()
        return board

    def render(self) -> str:
        """Return the board with placed letters shown in green."""
        lines = []
        for row in self._rows:
            lines.append(
                row[:1]
                + "".join(f"{GREEN}{c}{RESET}" if _is_letter(c) else c for c in row[1:])
            )
        return "".join(f"{line}\n" for line in lines)

    def is_empty(self) -> bool:
        """True when no letter has been placed on the board."""
        return not any(_is_letter(c) for row in self._rows for c in row[1:])

    def mark_started(self) -> None:
        """Record that the opening word has already been played."""
        self.started = True

    def turn_line(self) -> str:
        return f"{self.current_player}, it's your turn"

    def place_tiles(self, placements: Iterable[Placement | str]) -> None:
        """Put the tiles down, or raise PlacementError and leave the board unchanged."""
        moves = [_as_placement(move) for move in placements]
        previous = list(self._rows)
        try:
            for move in moves:
                y, x = self._locate(move)
                row = self._rows[y]
                index = 4 + 4 * x
                if row[index] != EMPTY:
                    raise PlacementError("Cannot place a tile on an occupied location")
                self._rows[y] = row[:index] + move.letter + row[index + 1 :]
            if not self.is_connected(moves):
                raise PlacementError("Word must be placed next to another word")
            if not self.words_valid(moves):
                raise PlacementError("That word is not in the Scrabble Dictionary")
        except PlacementError:
            self._rows = previous
            raise
        self.started = True

    def is_connected(self, placements: Iterable[Placement | str]) -> bool:
        """True when the placed tiles join existing letters, or form the opening word."""
        moves = [_as_placement(move) for move in placements]
        for move in moves:
            y, x = self._locate(move)
            if self._long_enough(self._horizontal_word(y, x), len(moves)):
                return True
            if self._long_enough(self._vertical_word(y, x), len(moves)):
                return True
        return False

    def words_valid(self, placements: Iterable[Placement | str]) -> bool:
        """True when every word of two or more letters through a tile is in the dictionary."""
        for move in map(_as_placement, placements):
            y, x = self._locate(move)
            for word in (self._horizontal_word(y, x), self._vertical_word(y, x)):
                if len(word) > 1 and word not in self.dictionary:
                    return False
        return True

    def _long_enough(self, word: str, count: int) -> bool:
        return len(word) > count or (not self.started and len(word) == count)

    def _locate(self, move: Placement) -> tuple[int, int]:
        x = move.column
        if not 0 <= x <= LAST_COLUMN:
            raise PlacementError("Outside of board area (x-axis)")
        for y, row in enumerate(self._rows):
            if row[:1] == move.row:
                if 4 + 4 * x >= len(row):
                    raise PlacementError("Outside of board area (x-axis)")
                return y, x
        raise PlacementError("Outside of board area (y-axis)")

    def _cell(self, y: int, x: int) -> str:
        row = self._rows[y]
        index = 4 + 4 * x
        return row[index] if x >= 0 and index < len(row) else EMPTY

    def _horizontal_word(self, y: int, x: int) -> str:
        left = _run(self._cell(y, c) for c in range(x - 1, -1, -1))
        right = _run(self._cell(y, c) for c in range(x + 1, LAST_COLUMN + 1))
        return left[::-1] + self._cell(y, x) + right

    def _vertical_word(self, y: int, x: int) -> str:
        above = _run(self._cell(r, x) for r in range(y - 1, FIRST_ROW - 1, -1))
        below = _run(self._cell(r, x) for r in range(y + 1, len(self._rows)))
        return above[::-1] + self._cell(y, x) + below