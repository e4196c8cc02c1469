import io

import pytest

from pacdots.symbols import Tile
from pacdots.terminal import Colour, colour_code, getch, tile_colour


def test_colour_escape_codes():
    assert colour_code(Colour.BLUE) == "\x1b[34m"
    assert colour_code(Colour.YELLOW) == "\x1b[33m"
    assert colour_code(Colour.PINK) == "\x1b[35m"
    assert colour_code(Colour.WHITE) == "\x1b[0m"


def test_colour_code_accepts_numeric_colour():
    assert colour_code(1) == colour_code(Colour.BLUE)
    assert colour_code(15) == colour_code(Colour.WHITE)


def test_unknown_colour_is_rejected():
    with pytest.raises(ValueError):
        colour_code(2)


def test_tile_colours():
    assert tile_colour(Tile.WALL) is Colour.BLUE
    assert tile_colour(Tile.GHOST) is Colour.PINK
    assert tile_colour(Tile.PLAYER) is Colour.YELLOW
    assert tile_colour(Tile.DOT) is Colour.WHITE
    assert tile_colour(Tile.EMPTY) is Colour.WHITE


def test_tile_colour_accepts_characters():
    assert tile_colour("W") is Colour.BLUE


def test_tile_colour_rejects_unknown_symbol():
    with pytest.raises(ValueError):
        tile_colour("?")


def test_getch_reads_one_character_at_a_time():
    stream = io.StringIO("wd")
    assert getch(stream) == "w"
    assert getch(stream) == "d"


def test_getch_returns_empty_string_at_end_of_input():
    stream = io.StringIO("s")
    getch(stream)
    assert getch(stream) == ""