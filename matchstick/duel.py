"""Two players against each other, in rainbow colours."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .board import Board
from .colors import Rainbow
from .game import EXIT_ERROR, ReadLine, Write, parse_arguments
from .rules import InvalidMove, validate_line, validate_matches


def is_finished(board: Board) -> bool:
    """True once fewer than two matches are left on the board."""
    return board.total_matches() < 2


def _at_end(text: str | None) -> bool:
    return text is None or text == ""


class _Duel:
    def __init__(
        self,
        board: Board,
        max_matches: int,
        read_line: ReadLine,
        write: Write,
        rainbow: Rainbow,
    ) -> None:
        self.board = board
        self.max_matches = max_matches
        self.read_line = read_line
        self.write = write
        self.rainbow = rainbow

    def say(self, text: str) -> None:
        self.write(self.rainbow.paint(text))

    def show_board(self) -> None:
        for row in self.board.rows:
            self.write(self.rainbow.paint(row) + "\n")

    def ask_name(self, number: int) -> str | None:
        self.say(f"What's your name Player {number}?\n")
        text = self.read_line()
        if _at_end(text):
            return None
        return text.split("\n", 1)[0]

    def turn(self, name: str) -> bool:
        while True:
            self.say("Line: ")
            text = self.read_line()
            if _at_end(text):
                return False
            try:
                line = validate_line(self.board, text)
            except InvalidMove as error:
                self.say(f"{error}\n")
                continue
            self.say("Matches: ")
            text = self.read_line()
            if _at_end(text):
                return False
            try:
                matches = validate_matches(self.board, line, text, self.max_matches)
            except InvalidMove as error:
                self.say(f"{error}\n")
                continue
            self.say(f"{name} removed {matches} match(es) from line {line}")
            self.write("\n")
            self.board.remove(line, matches)
            self.show_board()
            return True

    def play(self, names: Sequence[str]) -> str | None:
        if len(names) != 2:
            raise ValueError("a duel needs exactly two players")
        first, second = names
        self.show_board()
        while True:
            for current, other in ((first, second), (second, first)):
                self.say(f"\nYour turn {current}!\n")
                if not self.turn(current):
                    return None
                if is_finished(self.board):
                    self.say(f"You lost {other}, you suck!!!\n")
                    return other


def play_duel(
    board: Board,
    max_matches: int,
    names: Sequence[str],
    read_line: ReadLine,
    write: Write,
) -> str | None:
    """Let two named players take turns until at most one match is left.

    The player who leaves the last match wins.  Returns the loser's name,
    or ``None`` when the input ran out first.
    """
    return _Duel(board, max_matches, read_line, write, Rainbow()).play(names)


def _read_stdin() -> str | None:
    return sys.stdin.readline() or None


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run a two-player duel from the command line; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        lines, max_matches = parse_arguments(args)
    except ValueError:
        return EXIT_ERROR
    duel = _Duel(Board(lines), max_matches, _read_stdin, _write_stdout, Rainbow())
    first = duel.ask_name(1)
    if first is None:
        return EXIT_ERROR
    second = duel.ask_name(2)
    if second is None:
        return EXIT_ERROR
    duel.play((first, second))
    return 0


if __name__ == "__main__":
    sys.exit(main())