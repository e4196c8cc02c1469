"""Symbols, directions and status values shared across the game."""

from enum import Enum, IntEnum

NUM_GHOSTS = 2
MAP_NAME = "map.txt"


class Tile(str, Enum):
    """A symbol that may appear on the map."""

    PLAYER = "P"
    GHOST = "G"
    DOT = "."
    WALL = "W"
    EMPTY = " "


class Direction(str, Enum):
    """A movement direction, valued by the key that selects it."""

    UP = "w"
    LEFT = "a"
    DOWN = "s"
    RIGHT = "d"

    def step(self, y, x):
        """Return the coordinates one square away in this direction."""
        dy, dx = _DELTAS[self]
        return y + dy, x + dx


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.LEFT: (0, -1),
    Direction.DOWN: (1, 0),
    Direction.RIGHT: (0, 1),
}


class MoveResult(Enum):
    """What happened when an actor tried to move."""

    OKAY = "okay"
    WALL = "wall"
    INVALID_DIRECTION = "invalid_direction"
    CAUGHT = "caught"


class Sight(Enum):
    """What a ghost sees when it cannot see the player along a direction."""

    NOTHING = 0
    EATING_PLAYER = 1


class Outcome(Enum):
    """State of the game after a turn."""

    KEEP_GOING = "keep_going"
    WIN = "win"
    LOSE = "lose"


class ExitCode(IntEnum):
    """Process exit status of the game."""

    NO_ERROR = 0
    NO_MAP = 1
    NO_PLAYER = 2
    NO_GHOSTS = 3