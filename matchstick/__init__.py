"""Matchstick: a terminal game of removing matches from a pyramid."""

__version__ = "1.0.0"
__all__ = ["ai", "board", "colors", "duel", "game", "printf", "rules"]