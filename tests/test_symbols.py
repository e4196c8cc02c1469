import pytest

from pacdots.symbols import Direction, ExitCode, Tile


def test_tiles_parse_from_map_characters():
    assert Tile("P") is Tile.PLAYER
    assert Tile("G") is Tile.GHOST
    assert Tile(".") is Tile.DOT
    assert Tile("W") is Tile.WALL
    assert Tile(" ") is Tile.EMPTY


def test_unknown_tile_is_rejected():
    with pytest.raises(ValueError):
        Tile("X")


def test_directions_parse_from_keys():
    assert Direction("w") is Direction.UP
    assert Direction("a") is Direction.LEFT
    assert Direction("s") is Direction.DOWN
    assert Direction("d") is Direction.RIGHT


def test_unknown_key_is_not_a_direction():
    with pytest.raises(ValueError):
        Direction("P")


@pytest.mark.parametrize(
    "there, back",
    [(Direction.UP, Direction.DOWN), (Direction.LEFT, Direction.RIGHT)],
)
def test_opposite_steps_return_to_start(there, back):
    y, x = there.step(4, 7)
    assert back.step(y, x) == (4, 7)


@pytest.mark.parametrize("key", ["w", "a", "s", "d"])
def test_step_moves_exactly_one_square(key):
    y, x = Direction(key).step(3, 3)
    assert abs(y - 3) + abs(x - 3) == 1


def test_vertical_steps_keep_column_and_horizontal_keep_row():
    assert Direction.UP.step(2, 5)[1] == 5
    assert Direction.DOWN.step(2, 5)[1] == 5
    assert Direction.LEFT.step(2, 5)[0] == 2
    assert Direction.RIGHT.step(2, 5)[0] == 2


def test_up_decreases_row():
    assert Direction.UP.step(1, 1)[0] < 1
    assert Direction.RIGHT.step(1, 1)[1] > 1


@pytest.mark.parametrize(
    "code, member",
    [
        (0, ExitCode.NO_ERROR),
        (1, ExitCode.NO_MAP),
        (2, ExitCode.NO_PLAYER),
        (3, ExitCode.NO_GHOSTS),
    ],
)
def test_exit_codes_match_documented_values(code, member):
    assert ExitCode(code) is member


def test_unknown_exit_code_is_rejected():
    with pytest.raises(ValueError):
        ExitCode(4)