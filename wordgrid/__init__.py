"""A two-player terminal crossword tile game: tiles, board, turns and save files."""

__version__ = "0.1.0"

__all__ = ["board", "game", "menu", "player", "savefile", "student", "tile", "tiles"]