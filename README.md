# pacdots

A small maze game for the terminal. You steer the player `P` around a map,
eating every dot `.` while two ghosts `G` move through the maze. A ghost that
can see you along a straight row or column with no wall in between moves
towards you. Any other ghost tries random directions until one works. Eat
every dot to win. If a ghost catches you, you lose.

## Installing

```
pip install .
```

## Playing

```
pacdots [MAP]
```

`MAP` is the map file to play. It defaults to `map.txt` in the current
directory.

Controls, one key at a time:

| Key | Move  |
|-----|-------|
| `w` | up    |
| `a` | left  |
| `s` | down  |
| `d` | right |

Any other key leaves the player where it is, but the ghosts still move. The
map is redrawn in colour after every key. The game ends when you win, when a
ghost catches you, or when input runs out.

The command's exit status tells you what happened:

| Status | Meaning                           |
|--------|-----------------------------------|
| 0      | the game was played               |
| 1      | the map file could not be found   |
| 2      | the map has no player             |
| 3      | the map has fewer than two ghosts |

## Map format

A map is a rectangle of symbols, one row per line. Each symbol is separated
from the next by two spaces. The width is taken from the first line. The
outer wall is drawn automatically and is not part of the file.

```
.  P  .  .
W     W  W
G  .  .  G
```

Symbols:

- `P`: the player. If there are several, the last one in reading order is used.
- `G`: a ghost. At least two are needed, and the first two in reading order are used.
- `.`: a dot.
- `W`: a wall.
- a blank: an empty square.

## Using it as a library

```python
import io
import random

from pacdots.actors import move_player
from pacdots.board import parse_map
from pacdots.cli import play
from pacdots.rules import check_win
from pacdots.symbols import Direction, Tile

board = parse_map(".  P  .\nG     G")
player = next(board.find(Tile.PLAYER))             # (0, 1)
result, player = move_player(board, player, Direction.RIGHT)
print(result, player, check_win(board))            # MoveResult.OKAY (0, 2) Outcome.KEEP_GOING

outcome = play(parse_map(".  P  .\nG     G"), "aadd", io.StringIO(), random.Random(0))
```

The modules:

- `pacdots.symbols`: the `Tile`, `Direction`, `MoveResult`, `Sight`, `Outcome` and `ExitCode` enums.
- `pacdots.board`: `Board`, plus `parse_map` and `load_map`. `load_map` raises `MapNotFoundError` for a missing file. `Board.render` draws the map with its border.
- `pacdots.actors`: `sees_player`, `move_player` and `move_ghost`. Each move function returns a `(result, position)` pair.
- `pacdots.rules`: `check_win` and `check_loss`.
- `pacdots.terminal`: the ANSI colours (`Colour`, `colour_code`, `tile_colour`) and `getch`.
- `pacdots.cli`: `update_ghost`, `play` (a whole game driven by any sequence of keys) and `main`.

## Limitations

Keys are read one at a time, without Enter, only on a terminal that offers
`termios`, such as Linux or macOS. Elsewhere, and when input is piped in,
`getch` reads characters from standard input as they arrive. There is no
score, no levels and no saved state.

## Running the tests

```
pip install ".[test]"
python -m pytest
```