"""Win and loss conditions."""

from .symbols import Outcome


def check_win(board):
    """Return ``Outcome.WIN`` once no dots remain, else ``KEEP_GOING``."""
    return Outcome.KEEP_GOING if board.dots else Outcome.WIN


def check_loss(player, ghosts):
    """Return ``Outcome.LOSE`` if any ghost shares the player's square."""
    here = tuple(player)
    if any(tuple(ghost) == here for ghost in ghosts):
        return Outcome.LOSE
    return Outcome.KEEP_GOING