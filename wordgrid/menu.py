"""Reading a player's commands during a turn."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from .tile import Tile


class MoveError(ValueError):
    """A command typed by a player was rejected."""


class EndOfInput(Exception):
    """Input ended while a command was expected."""


def _coordinate_ok(coordinate: str) -> bool:
    return (
        len(coordinate) >= 2
        and coordinate[0].isascii()
        and coordinate[0].isupper()
        and coordinate[1:].isascii()
        and coordinate[1:].isdigit()
    )


def parse_command(line: str, hand: Iterable[Tile]) -> str:
    """Interpret one line typed during a turn.

    Returns ``"done"``, ``"pass"``, ``"help"``, ``"replace<L>"``,
    ``"save<name>"`` or a move of the form ``"<L>-<row><col>"``.
    """
    command = "".join(line.split())

    if command.startswith("save") and len(command) > 4:
        if command[4:] == "back":
            raise MoveError("Cannot call the save file 'back'")
        return command

    if not 10 <= len(command) <= 11:
        if command == "placeDone":
            return "done"
        if command == "pass":
            return "pass"
        if command == "help":
            return "help"
        if command.startswith("replace") and len(command) > 7:
            return command
        raise MoveError("Statement formatting is incorrect")

    place, letter, at, coordinate = command[:5], command[5], command[6:8], command[8:]
    if (
        place != "place"
        or at != "at"
        or not (letter.isascii() and letter.isupper())
        or not _coordinate_ok(coordinate)
    ):
        raise MoveError("Invalid placing format")
    if not any(tile.letter == letter for tile in hand):
        raise MoveError("You don't have that tile in your hand")
    return f"{letter}-{coordinate}"


class Menu:
    """Prompts for commands until a valid one is typed."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def enter_tile(self, hand: Iterable[Tile]) -> str:
        """Prompt until a valid command is read; raise EndOfInput at end of input."""
        tiles = list(hand)
        while True:
            self.stdout.write("> ")
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                self.stdout.write("Goodbye\n")
                raise EndOfInput()
            try:
                return parse_command(line, tiles)
            except MoveError as error:
                self.stdout.write(f"{error}\n")