import pytest

from wordgrid.board import (
    Board,
    Placement,
    PlacementError,
    load_dictionary,
    parse_placement,
)

HEADER = "    " + "   ".join(str(i % 10) for i in range(15))
SEPARATOR = "  " + "-" * 61
LETTERS = "ABCDEFGHIJKLMNO"
WORDS = {"CAT", "CATS", "AT"}


def blank_rows():
    return [HEADER, SEPARATOR] + [f"{letter} |" + "   |" * 15 for letter in LETTERS]


def letter_at(board, row, column):
    line = next(r for r in board.rows if r[0] == row)
    return line[4 + 4 * column]


@pytest.fixture
def board():
    return Board(blank_rows(), WORDS)


@pytest.fixture
def cat_board(board):
    board.place_tiles(["C-H7", "A-H8", "T-H9"])
    return board


def test_parse_placement_single_digit():
    assert parse_placement("A-H7") == Placement("A", "H", 7)


def test_parse_placement_double_digit():
    assert parse_placement("B-C10") == Placement("B", "C", 10)


def test_placement_str_round_trip():
    assert str(parse_placement("Q-O14")) == "Q-O14"


@pytest.mark.parametrize("text", ["A", "AH7", "A-Hx"])
def test_parse_placement_malformed(text):
    with pytest.raises(PlacementError):
        parse_placement(text)


def test_new_board_is_empty(board):
    assert board.is_empty()
    assert board.started is False


def test_first_single_tile(board):
    board.place_tiles(["A-H7"])
    assert letter_at(board, "H", 7) == "A"
    assert not board.is_empty()
    assert board.started


def test_first_word_placed(cat_board):
    assert [letter_at(cat_board, "H", c) for c in (7, 8, 9)] == ["C", "A", "T"]


def test_unknown_word_restores_board(board):
    before = board.rows
    with pytest.raises(PlacementError, match="That word is not in the Scrabble Dictionary"):
        board.place_tiles(["D-H7", "O-H8", "G-H9"])
    assert board.rows == before
    assert board.started is False


def test_extend_word(cat_board):
    cat_board.place_tiles(["S-H10"])
    assert letter_at(cat_board, "H", 10) == "S"


def test_disconnected_after_start(cat_board):
    before = cat_board.rows
    with pytest.raises(PlacementError, match="Word must be placed next to another word"):
        cat_board.place_tiles(["A-A0", "T-A1"])
    assert cat_board.rows == before


def test_occupied_location(cat_board):
    before = cat_board.rows
    with pytest.raises(PlacementError, match="Cannot place a tile on an occupied location"):
        cat_board.place_tiles(["S-H7"])
    assert cat_board.rows == before


def test_outside_x_axis(board):
    with pytest.raises(PlacementError, match="x-axis"):
        board.place_tiles([Placement("A", "H", 16)])
    assert board.is_empty()


def test_outside_y_axis(board):
    with pytest.raises(PlacementError, match="y-axis"):
        board.place_tiles(["A-Z3"])
    assert board.is_empty()


def test_empty_move_is_not_connected(board):
    with pytest.raises(PlacementError, match="next to another word"):
        board.place_tiles([])


def test_vertical_word(cat_board):
    cat_board.place_tiles(["T-I8"])
    assert letter_at(cat_board, "I", 8) == "T"
    assert cat_board.words_valid(["T-I8"])


def test_invalid_crossword_rejected(cat_board):
    with pytest.raises(PlacementError, match="Scrabble Dictionary"):
        cat_board.place_tiles(["X-I8"])
    assert letter_at(cat_board, "I", 8) == " "


def test_is_connected_direct(cat_board):
    assert cat_board.is_connected(["C-H7"])
    assert not cat_board.is_connected(["X-A0"])


def test_words_valid_direct(cat_board):
    assert cat_board.words_valid(["C-H7", "A-H8", "T-H9"])
    plain = Board(cat_board.rows, ["DOG"])
    assert not plain.words_valid(["C-H7"])


def test_render_colours_letters(cat_board):
    text = cat_board.render()
    assert "\033[32mC\033[0m" in text
    assert any(line.startswith("H |") for line in text.splitlines())


def test_render_blank_board(board):
    assert board.render() == "\n".join(blank_rows()) + "\n"


def test_turn_line(board):
    board.current_player = "ALICE"
    assert board.turn_line() == "ALICE, it's your turn"


def test_from_save_reads_board_rows():
    rows = blank_rows()
    lines = ["P", "0", "A-1", "Q", "0", "B-2"] + rows + ["C-3", "P"]
    board = Board.from_save(lines)
    assert board.rows == rows
    assert board.started is False


def test_from_save_with_letters_is_started(cat_board):
    lines = ["P", "0", "A-1", "Q", "0", "B-2"] + cat_board.rows + ["", "P"]
    loaded = Board.from_save(lines, WORDS)
    assert loaded.started
    with pytest.raises(PlacementError, match="next to another word"):
        loaded.place_tiles(["A-A0"])


def test_from_save_too_short():
    with pytest.raises(ValueError):
        Board.from_save(["P", "0"])


def test_mark_started_requires_connection(board):
    board.mark_started()
    with pytest.raises(PlacementError, match="next to another word"):
        board.place_tiles(["A-H7"])


def test_from_file(tmp_path):
    path = tmp_path / "base.txt"
    path.write_text("\n".join(blank_rows()) + "\n", encoding="utf-8")
    board = Board.from_file(path, WORDS)
    assert board.rows == blank_rows()
    assert board.is_empty()


def test_load_dictionary_uppercases(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\nDog\r\nbird\n", encoding="utf-8")
    assert load_dictionary(path) == frozenset({"CAT", "DOG", "BIRD"})


def test_dictionary_is_uppercased():
    board = Board(blank_rows(), ["cat"])
    board.place_tiles(["C-H7", "A-H8", "T-H9"])
    assert letter_at(board, "H", 9) == "T"