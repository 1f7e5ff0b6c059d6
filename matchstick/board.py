"""The matchstick pyramid and the moves that change it."""

from __future__ import annotations

MATCH = "|"
BORDER = "*"
EMPTY = " "


class Board:
    """A pyramid of matches framed by a border of stars.

    Row 0 and row ``size + 1`` are solid borders.  Row ``i`` for
    ``1 <= i <= size`` holds ``2 * i - 1`` matches, centred.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("a board needs at least one line")
        self.size = size
        width = size * 2 + 1
        self._rows: list[list[str]] = [[BORDER] * width]
        for line in range(1, size + 1):
            padding = [EMPTY] * (size - line)
            matches = [MATCH] * (line * 2 - 1)
            self._rows.append([BORDER, *padding, *matches, *padding, BORDER])
        self._rows.append([BORDER] * width)

    @property
    def rows(self) -> tuple[str, ...]:
        """Every row of the board, borders included, as strings."""
        return tuple("".join(row) for row in self._rows)

    def _row(self, line: int) -> list[str]:
        if not 0 <= line < len(self._rows):
            raise ValueError(f"line {line} is not on the board")
        return self._rows[line]

    def count_matches(self, line: int) -> int:
        """Number of matches left on ``line``."""
        return self._row(line).count(MATCH)

    def total_matches(self) -> int:
        """Number of matches left on the whole board."""
        return sum(row.count(MATCH) for row in self._rows)

    def remove(self, line: int, matches: int) -> None:
        """Take ``matches`` matches from the right end of ``line``."""
        row = self._row(line)
        if matches < 0:
            raise ValueError("cannot remove a negative number of matches")
        if matches > row.count(MATCH):
            raise ValueError("not enough matches on this line")
        if matches == 0:
            return
        last = len(row) - 1 - row[::-1].index(MATCH)
        for column in range(last, last - matches, -1):
            row[column] = EMPTY

    def is_empty(self) -> bool:
        """True once no match is left anywhere on the board."""
        return self.total_matches() == 0

    def render(self) -> str:
        """The board as printed: one row per line, each ending in a newline."""
        return "".join(row + "\n" for row in self.rows)