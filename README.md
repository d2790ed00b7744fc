# wordgrid

A two-player crossword tile game played in the terminal. Players take turns
laying letter tiles on a lettered grid. Every word of two or more letters that a
move forms must be in the word list. Every move after the opening word must join
letters already on the board. Laying seven tiles in one turn earns a 50-point
bonus.

## Installing

```
pip install .
```

## Playing

The game reads its data from a directory. The default is the current directory:

- `ScrabbleBase.txt`: the empty board layout. The first character of each row
  is its row letter. The tile cells sit at character 4, 8, 12 and onwards. The
  first two rows are the column header.
- `ScrabbleTiles.txt`: the tile bag, one tile per line. Each line holds the
  letter followed by its value, for example `A1` or `Q10`. The bag is shuffled
  at the start of a new game.
- `words.txt`: the word list, one word per line. Case does not matter.

```
wordgrid [DATA_DIR]
```

Saved games are written to and read from the same directory, as `NAME.save`.

The main menu offers these choices:

1. New game
2. Load game
3. Credits
4. Quit

Type `help` at any prompt to see what you can enter there. When loading, type
`back` to return to the menu.

Player names must be non-empty and upper case, with no digits. The two players
must have different names. Each player is dealt seven tiles.

### Commands during a turn

Spaces in a command are ignored.

| Input | Effect |
| --- | --- |
| `place A at H7` | queue tile `A` for row `H`, column `7` |
| `place Done` | lay the queued tiles and end your turn |
| `replace A` | put tile `A` at the back of the bag and draw from the front; ends your turn |
| `pass` | end your turn without playing |
| `save NAME` | write the game to `NAME.save` and quit (`back` is not allowed as a name) |
| `help` | list these commands |

If a move is rejected, the reason is shown and the same player tries again. A
move is rejected if it:

- is off the board,
- lands on an occupied square,
- is not connected to other letters, or
- forms a word that is not in the list.

A laid tile scores its face value. Used tiles are refilled from the bag while it
has tiles.

The game ends in either of two ways:

- a player's hand becomes empty, or
- the bag is empty and a player passes on two of their turns in a row.

The final scores are then shown. Player one wins only with a strictly higher
score; otherwise player two is declared the winner.

`wordgrid` exits with status 0 only if the menu returns normally. Quitting,
saving and the end of a game all exit with status 1. So does a data file that
cannot be read; that case also prints a message to standard error.

## Using it as a library

The pieces of the game can be used on their own:

```python
from wordgrid.tile import parse_tiles, format_tiles
from wordgrid.tiles import TileList
from wordgrid.board import Board, PlacementError, load_dictionary, parse_placement
from wordgrid.savefile import load_game, save_game

hand = TileList(parse_tiles("A-1, B-3, C-3"), colour=95)
print(format_tiles(hand))          # A-1, B-3, C-3

board = Board.from_file("ScrabbleBase.txt", load_dictionary("words.txt"))
try:
    board.place_tiles([parse_placement("C-H7"), parse_placement("A-H8"), parse_placement("T-H9")])
except PlacementError as error:
    print(error)
print(board.render())
```

### Modules

- **`wordgrid.tile`**
  - `Tile`: a letter and its value, written as `L-V`.
  - `parse_tile`, `parse_tiles` and `format_tiles` read and write the
    comma-separated form that save files use.
- **`wordgrid.tiles`**
  - `TileList`: the bag and the hands.
  - `draw`, `take`, `remove`, `add_back`, `count` and `contains` work on its
    tiles.
  - `render` shows a hand in its colour.
  - `from_saved` builds a list from the save form.
  - `new_bag` reads and shuffles a tile file. It takes an optional
    `random.Random`.
- **`wordgrid.player`**
  - `Player`: name, score, hand and pass state.
  - `check_name` raises `InvalidNameError` for a name the game would refuse.
- **`wordgrid.board`**
  - `Board` and `parse_placement`.
  - `Board.place_tiles` raises `PlacementError` and leaves the board unchanged
    when a move is refused.
  - `is_connected` and `words_valid` run the two checks on their own.
  - `from_save` reads the board rows out of the lines of a save file.
- **`wordgrid.menu`**
  - `parse_command` interprets one typed line and raises `MoveError` for bad
    input.
  - `Menu.enter_tile` prompts until a valid command is typed. It raises
    `EndOfInput` when input runs out.
- **`wordgrid.savefile`**
  - `SavedGame` holds a saved game. `dump` and `parse` write and read its text.
  - `save_game` and `load_game` work on files.
  - The format is one field per line:
    - each player's name, score and hand,
    - the 17 board rows,
    - the bag,
    - the current player's name.
- **`wordgrid.game`**
  - `Game` runs a whole session.
  - `Game` takes any text streams for input and output, a data directory and an
    optional `random.Random`.
  - It raises `GameQuit` when the session ends.

## What it does not do

The game is for exactly two people at one terminal. There is no computer
opponent and no network play. The board has no premium squares. Only face values
and the seven-tile bonus count towards the score. There is no challenge or undo
once a move is accepted.

## Running the tests

```
pip install .[test]
pytest
```