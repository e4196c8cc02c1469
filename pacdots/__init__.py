"""A terminal maze game: eat every dot before the ghosts catch you."""

__version__ = "0.1.0"
__all__ = ["actors", "board", "cli", "rules", "symbols", "terminal"]