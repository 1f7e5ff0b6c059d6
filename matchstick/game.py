"""The single-player game against the computer, and its command line."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from .ai import choose_line, choose_matches
from .board import Board
from .printf import format_string
from .rules import InvalidMove, validate_line, validate_matches

ReadLine = Callable[[], "str | None"]
Write = Callable[[str], object]

EXIT_ERROR = 84
MIN_LINES = 2
MAX_LINES = 99

PLAYER = "player"
AI = "ai"

_DIGITS = frozenset("0123456789")


def _parse_count(text: str) -> int:
    if any(ch not in _DIGITS for ch in text):
        raise ValueError(f"not a positive number: {text!r}")
    return int(text) if text else 0


def parse_arguments(argv: Sequence[str]) -> tuple[int, int]:
    """The number of lines and the per-turn match limit from the command line.

    Exactly two arguments are expected, both made of digits only; the number
    of lines must lie between 2 and 99.
    """
    if len(argv) != 2:
        raise ValueError("usage: matchstick LINES MAX_MATCHES")
    lines = _parse_count(argv[0])
    max_matches = _parse_count(argv[1])
    if not MIN_LINES <= lines <= MAX_LINES:
        raise ValueError(f"the number of lines must be between {MIN_LINES} and {MAX_LINES}")
    return lines, max_matches


def _at_end(text: str | None) -> bool:
    return text is None or text == ""


def _player_turn(board: Board, max_matches: int, read_line: ReadLine, write: Write) -> bool:
    """Ask until a valid move is made; False when the input runs out."""
    while True:
        write("Line: ")
        text = read_line()
        if _at_end(text):
            return False
        try:
            line = validate_line(board, text)
        except InvalidMove as error:
            write(f"{error}\n")
            continue
        write("Matches: ")
        text = read_line()
        if _at_end(text):
            return False
        try:
            matches = validate_matches(board, line, text, max_matches)
        except InvalidMove as error:
            write(f"{error}\n")
            continue
        write(format_string("Player removed %d match(es) from line %d\n", matches, line))
        board.remove(line, matches)
        write(board.render())
        return True


def _ai_turn(board: Board, max_matches: int, write: Write) -> None:
    line = choose_line(board)
    matches = choose_matches(board, line, max_matches)
    write(format_string("AI removed %d match(es) from line %d\n", matches, line))
    board.remove(line, matches)
    write(board.render())


def play(board: Board, max_matches: int, read_line: ReadLine, write: Write) -> str | None:
    """Play the player against the computer until someone takes the last match.

    ``read_line`` returns one line of input, or ``None`` or ``""`` once input
    is exhausted.  Returns the loser, ``"player"`` or ``"ai"``, or ``None``
    when the input ran out first.
    """
    write(board.render())
    while True:
        write("\nYour turn:\n")
        if not _player_turn(board, max_matches, read_line, write):
            return None
        if board.is_empty():
            write("You lost, too bad...\n")
            return PLAYER
        write("\nAI's turn...\n")
        _ai_turn(board, max_matches, write)
        if board.is_empty():
            write("I lost... snif... but I'll get you next time!!\n")
            return AI


def _read_stdin() -> str | None:
    return sys.stdin.readline() or None


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game from the command line; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        lines, max_matches = parse_arguments(args)
    except ValueError:
        return EXIT_ERROR
    play(Board(lines), max_matches, _read_stdin, _write_stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())