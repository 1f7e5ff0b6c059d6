"""The computer player's strategy."""

from __future__ import annotations

from .board import Board


def choose_line(board: Board) -> int:
    """The first line, from the top, that still holds a match."""
    for line, row in enumerate(board.rows):
        if "|" in row:
            return line
    raise ValueError("no matches left on the board")


def choose_matches(board: Board, line: int, max_matches: int) -> int:
    """Half the matches on ``line`` plus one, capped at ``max_matches``."""
    return min(board.count_matches(line) // 2 + 1, max_matches)