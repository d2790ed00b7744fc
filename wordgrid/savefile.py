"""Reading and writing saved games."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike

from .board import SAVE_BOARD_END, SAVE_BOARD_START
from .tile import Tile, format_tiles, parse_tiles

BOARD_ROWS = SAVE_BOARD_END - SAVE_BOARD_START
BAG_LINE = SAVE_BOARD_END
CURRENT_PLAYER_LINE = BAG_LINE + 1


@dataclass
class SavedGame:
    """Everything a save file records about a game in progress."""

    player1_name: str
    player1_score: int
    player1_hand: list[Tile]
    player2_name: str
    player2_score: int
    player2_hand: list[Tile]
    board_rows: list[str]
    bag: list[Tile] = field(default_factory=list)
    current_player: str = ""

    def dump(self) -> str:
        """Return the text of the save file, one field per line."""
        if len(self.board_rows) != BOARD_ROWS:
            raise ValueError(
                f"a saved board needs {BOARD_ROWS} rows, got {len(self.board_rows)}"
            )
        lines = [
            self.player1_name,
            str(self.player1_score),
            format_tiles(self.player1_hand),
            self.player2_name,
            str(self.player2_score),
            format_tiles(self.player2_hand),
            *self.board_rows,
            format_tiles(self.bag),
            self.current_player,
        ]
        return "\n".join(lines)

    @classmethod
    def parse(cls, text: str) -> "SavedGame":
        """Read a save file's text; raise ValueError if it is malformed."""
        lines = [line.rstrip("\r") for line in text.split("\n")]
        if len(lines) < CURRENT_PLAYER_LINE:
            raise ValueError("save file is too short")
        current = lines[CURRENT_PLAYER_LINE] if len(lines) > CURRENT_PLAYER_LINE else ""
        try:
            return cls(
                player1_name=lines[0],
                player1_score=int(lines[1]),
                player1_hand=parse_tiles(lines[2]),
                player2_name=lines[3],
                player2_score=int(lines[4]),
                player2_hand=parse_tiles(lines[5]),
                board_rows=lines[SAVE_BOARD_START:SAVE_BOARD_END],
                bag=parse_tiles(lines[BAG_LINE]),
                current_player=current,
            )
        except ValueError as error:
            raise ValueError(f"malformed save file: {error}") from error

    def lines(self) -> list[str]:
        """The save file's lines, as the board loader expects them."""
        return self.dump().split("\n")


def save_game(path: str | PathLike[str], game: SavedGame) -> None:
    """Write ``game`` to ``path``."""
    text = game.dump()
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)


def load_game(path: str | PathLike[str]) -> SavedGame:
    """Read a saved game from ``path``."""
    with open(path, encoding="utf-8", newline="") as handle:
        return SavedGame.parse(handle.read())