"""Console colours and single-key input."""

import os
import sys
from enum import Enum

try:
    import termios
except ImportError:  # pragma: no cover - platforms without termios
    termios = None

from .symbols import Tile


class Colour(Enum):
    """Text colours available on the console."""

    BLUE = 1
    YELLOW = 6
    PINK = 13
    WHITE = 15


_ESCAPES = {
    Colour.BLUE: "\x1b[34m",
    Colour.YELLOW: "\x1b[33m",
    Colour.PINK: "\x1b[35m",
    Colour.WHITE: "\x1b[0m",
}

_TILE_COLOURS = {
    Tile.WALL: Colour.BLUE,
    Tile.GHOST: Colour.PINK,
    Tile.PLAYER: Colour.YELLOW,
}


def colour_code(colour):
    """Return the ANSI escape sequence that switches to ``colour``.

    Raises ValueError for a value that is not a known colour.
    """
    return _ESCAPES[Colour(colour)]


def tile_colour(tile):
    """Return the colour a map tile is drawn in."""
    return _TILE_COLOURS.get(Tile(tile), Colour.WHITE)


def _is_tty(stream):
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def getch(stream=None):
    """Read one character without waiting for Enter.

    Returns an empty string at end of input.
    """
    stream = sys.stdin if stream is None else stream
    if termios is None or not _is_tty(stream):
        return stream.read(1)

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    iflags = (
        getattr(termios, "IMAXBEL", 0)
        | termios.IGNBRK
        | termios.BRKINT
        | termios.PARMRK
        | termios.ISTRIP
        | termios.INLCR
        | termios.IGNCR
        | termios.ICRNL
        | termios.IXON
    )
    lflags = termios.ECHO | termios.ECHONL | termios.ICANON | termios.ISIG | termios.IEXTEN
    raw[0] &= ~iflags
    raw[1] &= ~termios.OPOST
    raw[2] &= ~(termios.CSIZE | termios.PARENB)
    raw[2] |= termios.CS8
    raw[3] &= ~lflags
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)
    return data.decode("latin-1")