"""Checking what a player typed for a move."""

from __future__ import annotations

from .board import Board

_DIGITS = frozenset("0123456789")


class InvalidMove(ValueError):
    """A move the rules refuse; the message is what the player is shown."""


def parse_number(text: str) -> int:
    """Read a non-negative whole number from one line of input.

    Everything from the first newline on is ignored; an empty line reads
    as zero.
    """
    digits = text.split("\n", 1)[0]
    if any(ch not in _DIGITS for ch in digits):
        raise InvalidMove("Error: invalid input (positive number expected)")
    return int(digits) if digits else 0


def validate_line(board: Board, text: str) -> int:
    """The line number typed by the player, if it lies on the board."""
    line = parse_number(text)
    if line > board.size or line < 0:
        raise InvalidMove("Error: this line is out of range")
    return line


def validate_matches(board: Board, line: int, text: str, max_matches: int) -> int:
    """The number of matches typed by the player, if it may be taken."""
    matches = parse_number(text)
    if matches == 0:
        raise InvalidMove("Error: you have to remove at least one match")
    if matches > max_matches:
        raise InvalidMove(
            f"Error: you cannot remove more than {max_matches} matches per turn"
        )
    if matches > board.count_matches(line):
        raise InvalidMove("Error: not enough matches on this line")
    return matches