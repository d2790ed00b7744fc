"""The game session: menus, turns, saving and loading."""

from __future__ import annotations

import argparse
import random
import sys
from os import PathLike
from pathlib import Path
from typing import NoReturn, TextIO

from .board import Board, PlacementError, load_dictionary
from .menu import EndOfInput, Menu
from .player import InvalidNameError, Player, check_name
from .savefile import SavedGame, load_game, save_game
from .student import Student
from .tiles import TileList

BOARD_FILE = "ScrabbleBase.txt"
TILES_FILE = "ScrabbleTiles.txt"
WORDS_FILE = "words.txt"
SAVE_SUFFIX = ".save"

PLAYER1_COLOUR = 95
PLAYER2_COLOUR = 96
BINGO_TILES = 7
BINGO_BONUS = 50

HELP_RULE = "-" * 67
CREDITS_RULE = "-" * 34

MENU_LINES = ("Menu", "____", "1. New Game", "2. Load Game", "3. Credits", "4. Quit", "")
MENU_HELP = (
    "From this location you're able to:",
    "- Input number 1 for a new game",
    "- Input number 2 to load a game",
    "- Input number 3 to show the game credits",
    "- Input number 4 to quit the application",
    HELP_RULE,
)
NAME_HELP = (
    "From this location you're able to:",
    "- Enter your in-game name: 'EXAMPLE'",
    HELP_RULE,
)
LOAD_HELP = (
    "From this location you're able to:",
    "- Input a file name to read that save file: example",
    "- Type 'back' to go back to the main menu",
    HELP_RULE,
)
TURN_HELP = (
    "From this location you're able to:",
    "- Place a tile: 'place A at A0'",
    "- End your turn and place your word: 'place Done",
    "- Replace a tile from your hand: 'replace A'",
    "- Pass your turn to the next player: 'pass'",
    "- Save the game at it's current state with a game name: 'save example'",
    HELP_RULE,
)

CREDITS = (
    Student("Contributor One", "0000001", "one@example.com"),
    Student("Contributor Two", "0000002", "two@example.com"),
    Student("Contributor Three", "0000003", "three@example.com"),
)


class GameQuit(Exception):
    """The session is over: a player quit, saved, or the game ended."""


class Game:
    """A two-player session read from ``stdin`` and shown on ``stdout``."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        data_dir: str | PathLike[str] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.data_dir = Path(data_dir) if data_dir is not None else Path.cwd()
        self.rng = rng
        self.menu = Menu(self.stdin, self.stdout)
        self.player1 = Player(hand=TileList(colour=PLAYER1_COLOUR))
        self.player2 = Player(hand=TileList(colour=PLAYER2_COLOUR))
        self.bag = TileList()
        self.board = Board([])
        self._saved: SavedGame | None = None

    # -- input and output -------------------------------------------------

    def _write(self, *lines: str) -> None:
        for line in lines:
            self.stdout.write(f"{line}\n")

    def _prompt(self) -> str | None:
        self.stdout.write("> ")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def _quit(self) -> NoReturn:
        self._write("Goodbye")
        raise GameQuit()

    def _current(self) -> Player:
        if self.board.current_player == self.player1.name:
            return self.player1
        return self.player2

    def _other(self) -> Player:
        if self.board.current_player == self.player1.name:
            return self.player2
        return self.player1

    def _show_scores(self) -> None:
        self._write(self.player1.score_line(), self.player2.score_line())

    def _dictionary(self) -> frozenset[str]:
        return load_dictionary(self.data_dir / WORDS_FILE)

    def _save_path(self, name: str) -> Path:
        return self.data_dir / f"{name}{SAVE_SUFFIX}"

    # -- main menu --------------------------------------------------------

    def run(self) -> None:
        """Show the main menu and act on the choices made."""
        self._write("Welcome to Scrabble!", "___________________")
        while True:
            self._write(*MENU_LINES)
            choice = self.select_option()
            if choice == 1:
                self.new_game()
                return
            if choice == 2:
                if self.load():
                    self.continue_turns()
                    return
                self._write("Going back to main menu")
            elif choice == 3:
                self.credits()
            else:
                self._quit()

    def select_option(self) -> int:
        """Read a main-menu choice from 1 to 4."""
        while True:
            text = self._prompt()
            if text is None:
                self._quit()
            if text == "help":
                self._write(*MENU_HELP)
            elif len(text) > 1:
                self._write("Too many characters entered")
            elif not text:
                self._write("Nothing entered, you don't want to do anything?")
            elif text.isascii() and text.isdigit():
                option = int(text)
                if 1 <= option <= 4:
                    return option
                self._write("Menu selection is out of bounds")
            else:
                self._write("Please enter a number")

    def credits(self) -> None:
        self._write("", CREDITS_RULE)
        for student in CREDITS:
            self._write(str(student), "")
        self._write(CREDITS_RULE, "")

    # -- starting a game --------------------------------------------------

    def _read_name(self, number: int) -> str:
        while True:
            self._write(f"Enter a name for player {number} (uppercase characters only)")
            name = self._prompt()
            if name is None:
                self._quit()
            if name == "help":
                self._write(*NAME_HELP)
                continue
            try:
                return check_name(name)
            except InvalidNameError as error:
                self._write(str(error))

    def new_game(self) -> None:
        """Deal a fresh game, read both names and play it."""
        self.bag = TileList.new_bag(self.data_dir / TILES_FILE, self.rng)
        dictionary = self._dictionary()
        self._write("Starting a New Game", "")

        self.player1 = Player(hand=TileList(colour=PLAYER1_COLOUR))
        self.player2 = Player(hand=TileList(colour=PLAYER2_COLOUR))
        self.player1.name = self._read_name(1)
        while True:
            name = self._read_name(2)
            if name == self.player1.name:
                self._write("Cannot have the same name as Player 1")
            else:
                self.player2.name = name
                break

        self.board = Board.from_file(self.data_dir / BOARD_FILE, dictionary)
        self.board.current_player = self.player1.name
        self._write(self.board.turn_line())
        self._show_scores()
        self._write(*self.board.rows)

        self.player1.fill_hand(self.bag)
        self.player2.fill_hand(self.bag)
        self.stdout.write(self.player1.hand.render())
        self.continue_turns()

    def load(self) -> bool:
        """Ask for a save file; True once one is read, False on 'back'."""
        while True:
            self._write("Enter a filename to load")
            name = self._prompt()
            if name is None:
                self._quit()
            if name == "help":
                self._write(*LOAD_HELP)
            elif name == "back":
                return False
            else:
                try:
                    saved = load_game(self._save_path(name))
                except OSError:
                    self._write("No save file with that name", "")
                    continue
                self._saved = saved
                return True

    def _restore(self, saved: SavedGame) -> None:
        self.player1 = Player(
            saved.player1_name,
            saved.player1_score,
            TileList(saved.player1_hand, PLAYER1_COLOUR),
        )
        self.player2 = Player(
            saved.player2_name,
            saved.player2_score,
            TileList(saved.player2_hand, PLAYER2_COLOUR),
        )
        self.board = Board.from_save(saved.lines(), self._dictionary())
        self.board.current_player = saved.current_player
        self._write("", self.board.turn_line())
        self._show_scores()
        self.stdout.write(self.board.render())
        self.bag = TileList(saved.bag)
        self.stdout.write(self._current().hand.render())

    # -- playing ----------------------------------------------------------

    def _enter(self, player: Player) -> str:
        try:
            return self.menu.enter_tile(player.hand)
        except EndOfInput:
            raise GameQuit() from None

    def continue_turns(self) -> None:
        """Play turns until the game ends or a player quits or saves."""
        if self._saved is not None:
            saved, self._saved = self._saved, None
            self._restore(saved)

        repeat_turn = True
        while True:
            if not repeat_turn:
                self.board.current_player = self._other().name
                self._write(self.board.turn_line())
                self._show_scores()
                self.stdout.write(self.board.render())
                self.stdout.write(self._current().hand.render())
            repeat_turn = False

            placements: list[str] = []
            passed = False
            end_turn = False
            while not end_turn:
                player = self._current()
                command = self._enter(player)
                if command == "done":
                    end_turn = True
                elif command == "pass":
                    end_turn = passed = True
                    placements.clear()
                    if self.bag.is_empty():
                        if player.has_passed:
                            self.end()
                        player.has_passed = True
                elif command == "help":
                    self._write(*TURN_HELP)
                elif command.startswith("replace"):
                    if self.replace_tile(command[7]):
                        end_turn = passed = True
                    placements.clear()
                elif command.startswith("save"):
                    self.save(command[4:])
                else:
                    letter = command[0]
                    used = sum(1 for move in placements if move[0] == letter)
                    if used < player.hand.count(letter):
                        placements.append(command)
                    else:
                        self._write("That tile has already been used")

            if passed:
                continue

            player = self._current()
            try:
                self.board.place_tiles(placements)
            except PlacementError as error:
                self._write(str(error))
                self.stdout.write(self.board.render())
                self.stdout.write(player.hand.render())
                repeat_turn = True
                continue
            self._write("")

            if len(placements) == BINGO_TILES:
                self._write("", "BINGO!!!", "")
                player.score += BINGO_BONUS
            for move in placements:
                letter = move[0]
                player.add_score_for(letter)
                player.hand.remove(letter)
                if player.hand.is_empty():
                    self.end()
                if not self.bag.is_empty():
                    player.hand.add_back(self.bag.draw())
                player.has_passed = False

    def replace_tile(self, letter: str) -> bool:
        """Swap a tile in the current player's hand for the front of the bag."""
        player = self._current()
        if not player.hand.contains(letter):
            self._write("You don't have that tile in your hand")
            return False
        if self.bag.is_empty():
            self._write("No tiles left in bag")
            return False
        self.bag.add_back(player.hand.take(letter))
        player.hand.add_back(self.bag.draw())
        return True

    def save(self, name: str) -> NoReturn:
        """Write the game to ``<name>.save`` and leave."""
        game = SavedGame(
            player1_name=self.player1.name,
            player1_score=self.player1.score,
            player1_hand=list(self.player1.hand),
            player2_name=self.player2.name,
            player2_score=self.player2.score,
            player2_hand=list(self.player2.hand),
            board_rows=self.board.rows,
            bag=list(self.bag),
            current_player=self.board.current_player,
        )
        try:
            save_game(self._save_path(name), game)
        except (OSError, ValueError):
            self._write("Problem with saving file")
        else:
            self._write("", "Game successfully saved", "")
        self._quit()

    def end(self) -> NoReturn:
        """Show the final scores and the winner, then leave."""
        self._write("Game over")
        self._show_scores()
        winner = self.player1 if self.player1.score > self.player2.score else self.player2
        self._write(f"Player {winner.name} won!", "")
        self._quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordgrid", description="Play a two-player word game in the terminal."
    )
    parser.add_argument(
        "data_dir",
        nargs="?",
        default=".",
        help="directory holding the board, the tiles, the word list and saves",
    )
    args = parser.parse_args(argv)
    game = Game(data_dir=args.data_dir)
    try:
        game.run()
    except GameQuit:
        return 1
    except (OSError, ValueError) as error:
        print(f"Unable to open file: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())