"""The game map: loading, querying and drawing."""

from dataclasses import dataclass, field

from .symbols import Tile
from .terminal import colour_code, tile_colour


class MapNotFoundError(FileNotFoundError):
    """Raised when the map file cannot be opened."""


@dataclass
class Board:
    """A rectangular grid of tiles plus the positions of uneaten dots."""

    tiles: list = field(default_factory=list)
    dots: set = field(default_factory=set)

    @classmethod
    def from_tiles(cls, rows):
        """Build a board from rows of tiles or map characters."""
        grid = [[Tile(symbol) for symbol in row] for row in rows]
        if any(len(row) != len(grid[0]) for row in grid):
            raise ValueError("map rows must all have the same width")
        dots = {
            (y, x)
            for y, row in enumerate(grid)
            for x, tile in enumerate(row)
            if tile is Tile.DOT
        }
        return cls(grid, dots)

    @property
    def height(self):
        return len(self.tiles)

    @property
    def width(self):
        return len(self.tiles[0]) if self.tiles else 0

    def _inside(self, y, x):
        return 0 <= y < self.height and 0 <= x < self.width

    def tile(self, y, x):
        """Return the tile at (y, x); raises IndexError outside the map."""
        if not self._inside(y, x):
            raise IndexError(f"({y}, {x}) is outside the map")
        return self.tiles[y][x]

    def is_wall(self, y, x):
        """True for a wall or any square outside the map."""
        return not self._inside(y, x) or self.tiles[y][x] is Tile.WALL

    def find(self, tile):
        """Yield the positions of ``tile`` in row-major order."""
        wanted = Tile(tile)
        for y, row in enumerate(self.tiles):
            for x, current in enumerate(row):
                if current is wanted:
                    yield y, x

    def render(self, colour=True):
        """Draw the map surrounded by a border of walls."""
        border = [Tile.WALL] * (self.width + 2)
        lines = [border]
        lines.extend([Tile.WALL, *row, Tile.WALL] for row in self.tiles)
        lines.append(border)

        def cell(tile):
            prefix = colour_code(tile_colour(tile)) if colour else ""
            return f"{prefix}{tile.value} "

        return "".join("".join(cell(tile) for tile in line) + "\n" for line in lines)


def parse_map(text):
    """Parse map text whose symbols are separated by two spaces."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("map is empty")
    width = max(len(lines[0]) - 1, 0) // 3 + 1
    span = 3 * width - 2
    return Board.from_tiles(line.ljust(span)[::3][:width] for line in lines)


def load_map(path):
    """Read and parse the map stored at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except FileNotFoundError as exc:
        raise MapNotFoundError(f"file not found: {path}") from exc
    return parse_map(text)