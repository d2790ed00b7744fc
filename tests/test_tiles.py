import random
from collections import Counter

import pytest

from wordgrid.tile import Tile
from wordgrid.tiles import TileList


def make(*letters):
    return TileList(Tile(letter, 1) for letter in letters)


def test_len_and_iter():
    tiles = [Tile("A", 1), Tile("B", 3)]
    lst = TileList(tiles)
    assert len(lst) == 2
    assert list(lst) == tiles


def test_draw_takes_front():
    lst = make("A", "B")
    assert lst.draw() == Tile("A", 1)
    assert list(lst) == [Tile("B", 1)]


def test_draw_empty_raises():
    with pytest.raises(IndexError):
        TileList().draw()


def test_take_returns_removed_tile():
    lst = TileList([Tile("A", 1), Tile("B", 3), Tile("B", 4)])
    assert lst.take("B") == Tile("B", 3)
    assert list(lst) == [Tile("A", 1), Tile("B", 4)]


def test_take_head():
    lst = TileList([Tile("A", 1), Tile("B", 3)])
    assert lst.take("A") == Tile("A", 1)
    assert len(lst) == 1


def test_take_missing_raises():
    with pytest.raises(KeyError):
        make("A").take("Z")


def test_tile_at_and_bounds():
    lst = make("A", "B", "C")
    assert lst.tile_at(2) == Tile("C", 1)
    with pytest.raises(IndexError):
        lst.tile_at(3)
    with pytest.raises(IndexError):
        lst.tile_at(-1)


def test_contains_and_count():
    lst = make("A", "B", "A")
    assert lst.contains("B")
    assert not lst.contains("C")
    assert lst.count("A") == 2


def test_add_back():
    lst = make("A")
    lst.add_back(Tile("Z", 10))
    assert lst.tile_at(1) == Tile("Z", 10)


def test_remove_first_only_and_missing_is_silent():
    lst = make("A", "B", "A")
    lst.remove("A")
    assert [t.letter for t in lst] == ["B", "A"]
    lst.remove("Q")
    assert len(lst) == 2


def test_clear_and_is_empty():
    lst = make("A", "B")
    assert not lst.is_empty()
    lst.clear()
    assert lst.is_empty()


def test_render_empty():
    assert TileList().render() == "List empty!\n"


def test_render_hand():
    lst = TileList([Tile("A", 1), Tile("B", 3)], colour=95)
    text = lst.render()
    assert "Your hand is" in text
    assert "\033[95mA-1, " in text
    assert text.endswith("B-3\033[0m\n\n")


def test_from_saved():
    lst = TileList.from_saved("A-1, Q-10")
    assert list(lst) == [Tile("A", 1), Tile("Q", 10)]


def test_new_bag_reads_and_shuffles(tmp_path):
    path = tmp_path / "tiles.txt"
    path.write_text("A 1\nA 1\nB 3\nQ 10\n\n", encoding="utf-8")
    bag = TileList.new_bag(path, random.Random(7))
    assert Counter(bag) == Counter([Tile("A", 1), Tile("A", 1), Tile("B", 3), Tile("Q", 10)])


def test_new_bag_same_seed_same_order(tmp_path):
    path = tmp_path / "tiles.txt"
    path.write_text("".join(f"{c} 1\n" for c in "ABCDEFGH"), encoding="utf-8")
    first = list(TileList.new_bag(path, random.Random(3)))
    second = list(TileList.new_bag(path, random.Random(3)))
    assert first == second


def test_new_bag_missing_file(tmp_path):
    with pytest.raises(OSError):
        TileList.new_bag(tmp_path / "absent.txt")


def test_new_bag_malformed_line(tmp_path):
    path = tmp_path / "tiles.txt"
    path.write_text("A x\n", encoding="utf-8")
    with pytest.raises(ValueError):
        TileList.new_bag(path)