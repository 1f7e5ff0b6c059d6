"""Rainbow colouring of text, one character at a time."""

from __future__ import annotations

RESET = "\033[0m"
RED = "\033[1;31m"
YELLOW = "\033[1;33m"
GREEN = "\033[1;32m"
BLUE = "\033[1;34m"
MAGENTA = "\033[1;35m"

_CYCLE = (RED, YELLOW, GREEN, BLUE, MAGENTA)


class Rainbow:
    """Paints each character in the next colour of the cycle.

    The cycle starts on red once; after magenta it goes back to yellow.
    The position carries over from one call to the next.
    """

    def __init__(self) -> None:
        self._index = 0

    def paint(self, text: str) -> str:
        """``text`` with every character wrapped in its own colour."""
        pieces = []
        for ch in str(text):
            colour = _CYCLE[self._index]
            if self._index == len(_CYCLE) - 1:
                self._index = 0
            pieces.append(f"{colour}{ch}{RESET}")
            self._index += 1
        return "".join(pieces)