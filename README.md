# matchstick

A terminal matchstick game. Matches are laid out in a pyramid inside a
frame of stars. On each turn a player picks a line and removes between one
match and a maximum number of matches from it.

## Installation

```
pip install .
```

## Playing against the computer

```
matchstick LINES MAX_MATCHES
```

`LINES` is the height of the pyramid and must be between 2 and 99.
`MAX_MATCHES` is the most matches that may be taken in a single turn. Both
arguments must be made of digits only; otherwise the command exits with
status 84.

Example with `matchstick 4 5`:

```
*********
*   |   *
*  |||  *
* ||||| *
*|||||||*
*********

Your turn:
Line: 4
Matches: 3
Player removed 3 match(es) from line 4
```

Each time you are prompted, enter a line number and then a number of
matches. Bad input (non-numeric text, a line out of range, zero matches,
more than the per-turn maximum, or more than the line holds) prints an error
and asks again from the line prompt. Closing the input (Ctrl-D) ends the
game.

Whoever takes the last match loses. The computer always plays on the
topmost line that still holds matches and takes half of them plus one,
capped at `MAX_MATCHES`.

## Two-player duel

```
matchstick-duel LINES MAX_MATCHES
```

The arguments are checked the same way as for `matchstick`. Both players
are asked for their names, then take turns at the same keyboard. The output
is drawn in rainbow colours. The game ends as soon as fewer than two matches
are left on the board; the player who would move next loses. If the input
ends while the names are being asked, the command exits with status 84.

## Using the library

```python
from matchstick.board import Board
from matchstick.ai import choose_line, choose_matches

board = Board(4)
print(board.render())
line = choose_line(board)
board.remove(line, choose_matches(board, line, 5))
print(board.total_matches())
```

- `matchstick.board.Board` holds the pyramid: `count_matches`,
  `total_matches`, `remove`, `is_empty`, `render` and the `rows` property.
- `matchstick.rules` validates player input (`parse_number`,
  `validate_line`, `validate_matches`) and raises `InvalidMove` carrying
  the game's error message when the input is rejected.
- `matchstick.game.play` and `matchstick.duel.play_duel` run a whole game
  with any `read_line` and `write` callables, and return the loser (or
  `None` when the input ran out).
- `matchstick.colors.Rainbow` colours text one character at a time,
  cycling through five colours.
- `matchstick.printf.format_string` formats text using a small set of
  printf-style conversions.

## Running the tests

```
pip install .[test]
pytest
```