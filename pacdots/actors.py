"""Sight lines and movement of the player and the ghosts."""

from .symbols import Direction, MoveResult, Sight, Tile


def _direction(direction):
    try:
        return Direction(direction)
    except ValueError:
        return None


def _inside(board, y, x):
    return 0 <= y < board.height and 0 <= x < board.width


def _clear_between(cells):
    return not any(tile is Tile.WALL for tile in cells)


def sees_player(board, player, ghost):
    """Return the direction a ghost must look to see the player.

    Returns ``Sight.EATING_PLAYER`` when both share a square and
    ``Sight.NOTHING`` when no straight, wall-free line joins them.
    """
    py, px = player
    gy, gx = ghost
    if (py, px) == (gy, gx):
        return Sight.EATING_PLAYER

    if py == gy:
        low, high = sorted((px, gx))
        row = board.tiles[py]
        if not _clear_between(row[x] for x in range(low + 1, high)):
            return Sight.NOTHING
        return Direction.LEFT if px < gx else Direction.RIGHT

    if px == gx:
        low, high = sorted((py, gy))
        if not _clear_between(board.tiles[y][px] for y in range(low + 1, high)):
            return Sight.NOTHING
        return Direction.UP if py < gy else Direction.DOWN

    return Sight.NOTHING


def move_player(board, position, direction):
    """Try to move the player one square, eating any dot there.

    Returns ``(result, position)``.  On ``MoveResult.CAUGHT`` the player
    walked into a ghost; the position is updated but the board is not.
    """
    step = _direction(direction)
    y, x = position
    if step is None:
        return MoveResult.INVALID_DIRECTION, (y, x)

    new_y, new_x = step.step(y, x)
    if board.is_wall(new_y, new_x):
        return MoveResult.WALL, (y, x)

    if board.tiles[new_y][new_x] is Tile.GHOST:
        return MoveResult.CAUGHT, (new_y, new_x)

    board.tiles[y][x] = Tile.EMPTY
    board.dots.discard((y, x))
    board.tiles[new_y][new_x] = Tile.PLAYER
    board.dots.discard((new_y, new_x))
    return MoveResult.OKAY, (new_y, new_x)


def move_ghost(board, position, direction):
    """Try to move a ghost one square, restoring any dot it leaves behind.

    Returns ``(result, position)``.
    """
    step = _direction(direction)
    y, x = position
    if step is None:
        return MoveResult.INVALID_DIRECTION, (y, x)

    new_y, new_x = step.step(y, x)
    if board.is_wall(new_y, new_x) or not _inside(board, y, x):
        return MoveResult.WALL, (y, x)

    board.tiles[y][x] = Tile.DOT if (y, x) in board.dots else Tile.EMPTY
    board.tiles[new_y][new_x] = Tile.GHOST
    return MoveResult.OKAY, (new_y, new_x)