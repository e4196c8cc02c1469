"""The interactive game loop and its command-line entry point."""

import argparse
import random
import sys

from .actors import move_ghost, move_player, sees_player
from .board import MapNotFoundError, load_map
from .rules import check_loss, check_win
from .symbols import MAP_NAME, NUM_GHOSTS, Direction, ExitCode, MoveResult, Outcome, Sight, Tile
from .terminal import getch

_RANDOM_ORDER = (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT)


def update_ghost(board, player, ghost, rng):
    """Move one ghost for a turn and return its new position.

    A ghost that sees the player heads towards them; otherwise it tries
    random directions until one works or all four have failed.
    """
    sight = sees_player(board, player, ghost)
    if sight is Sight.NOTHING:
        tried = set()
        while True:
            choice = rng.randrange(len(_RANDOM_ORDER))
            tried.add(choice)
            result, ghost = move_ghost(board, ghost, _RANDOM_ORDER[choice])
            if result is MoveResult.OKAY or len(tried) == len(_RANDOM_ORDER):
                return ghost
    if sight is not Sight.EATING_PLAYER:
        _, ghost = move_ghost(board, ghost, sight)
    return ghost


def _locate(board):
    players = list(board.find(Tile.PLAYER))
    player = players[-1] if players else None
    ghosts = list(board.find(Tile.GHOST))[:NUM_GHOSTS]
    return player, ghosts


def _show(out, text):
    out.write(text)
    out.flush()


def play(board, keys, out, rng):
    """Run the game on ``board`` with the given key presses.

    An empty key, or running out of keys, means end of input: that turn
    is still played and the game then stops.  Returns the final outcome.
    """
    player, ghosts = _locate(board)
    if player is None:
        raise ValueError("no player on the map")
    if len(ghosts) < NUM_GHOSTS:
        raise ValueError(f"the map needs {NUM_GHOSTS} ghosts")

    keys = iter(keys)
    while True:
        _show(out, board.render(True))
        key = next(keys, "")
        _, player = move_player(board, player, key)
        ghosts = [update_ghost(board, player, ghost, rng) for ghost in ghosts]

        if check_loss(player, ghosts) is Outcome.LOSE:
            _show(out, board.render(True))
            _show(out, "Sorry, you lose.\n")
            return Outcome.LOSE
        if check_win(board) is Outcome.WIN:
            _show(out, board.render(True))
            _show(out, "Congratulations! You win!\n")
            return Outcome.WIN
        if not key:
            return Outcome.KEEP_GOING


def main(argv=None):
    """Load the map and play from the console; return the exit status."""
    parser = argparse.ArgumentParser(prog="pacdots", description="Eat the dots, avoid the ghosts.")
    parser.add_argument("map", nargs="?", default=MAP_NAME, help="map file to play")
    args = parser.parse_args(argv)

    try:
        board = load_map(args.map)
    except MapNotFoundError:
        _show(sys.stdout, "file not found\n")
        return ExitCode.NO_MAP

    player, ghosts = _locate(board)
    if player is None:
        return ExitCode.NO_PLAYER
    if len(ghosts) < NUM_GHOSTS:
        return ExitCode.NO_GHOSTS

    play(board, iter(getch, ""), sys.stdout, random.Random())
    return ExitCode.NO_ERROR