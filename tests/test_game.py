import io

import pytest

from matchstick.board import Board
from matchstick.game import main, parse_arguments, play


def scripted(lines):
    feed = iter(lines)
    return lambda: next(feed, None)


def run(board, max_matches, lines):
    out = []
    result = play(board, max_matches, scripted(lines), out.append)
    return result, "".join(out)


def test_parse_arguments_accepts_valid_pair():
    assert parse_arguments(["3", "5"]) == (3, 5)


def test_parse_arguments_accepts_bounds():
    assert parse_arguments(["2", "1"]) == (2, 1)
    assert parse_arguments(["99", "7"]) == (99, 7)


@pytest.mark.parametrize(
    "argv",
    [["1", "5"], ["100", "5"], ["3"], ["3", "5", "1"], ["3", "x"], ["-3", "5"], ["3", "-1"]],
)
def test_parse_arguments_rejects(argv):
    with pytest.raises(ValueError):
        parse_arguments(argv)


def test_player_loses_after_taking_last_match():
    board = Board(2)
    result, out = run(board, 5, ["1\n", "1\n", "2\n", "1\n"])
    assert result == "player"
    assert board.is_empty()
    assert "Player removed 1 match(es) from line 1\n" in out
    assert "AI removed 2 match(es) from line 2\n" in out
    assert out.endswith("You lost, too bad...\n")


def test_ai_loses_after_taking_last_match():
    board = Board(2)
    result, out = run(board, 5, ["2\n", "3\n"])
    assert result == "ai"
    assert board.is_empty()
    assert "\nAI's turn...\n" in out
    assert out.endswith("I lost... snif... but I'll get you next time!!\n")


def test_output_starts_with_board_and_prompt():
    board = Board(2)
    expected_start = board.render() + "\nYour turn:\nLine: "
    result, out = run(board, 5, [])
    assert result is None
    assert out == expected_start


def test_out_of_range_line_is_asked_again():
    board = Board(2)
    result, out = run(board, 5, ["9\n", "2\n", "3\n"])
    assert result == "ai"
    assert "Error: this line is out of range\nLine: " in out


def test_invalid_input_reported():
    result, out = run(Board(2), 5, ["a\n"])
    assert result is None
    assert "Error: invalid input (positive number expected)\n" in out


def test_zero_matches_refused():
    result, out = run(Board(2), 5, ["1\n", "0\n"])
    assert result is None
    assert "Error: you have to remove at least one match\n" in out


def test_too_many_matches_refused():
    board = Board(3)
    result, out = run(board, 2, ["3\n", "3\n"])
    assert result is None
    assert "Error: you cannot remove more than 2 matches per turn\n" in out
    assert board.total_matches() == Board(3).total_matches()


def test_not_enough_matches_refused():
    result, out = run(Board(3), 10, ["1\n", "2\n"])
    assert result is None
    assert "Error: not enough matches on this line\n" in out


def test_ai_respects_limit():
    board = Board(3)
    result, out = run(board, 1, ["3\n", "1\n"])
    assert result is None
    assert "AI removed 1 match(es) from line 1\n" in out
    assert board.count_matches(1) == 0


def test_main_rejects_bad_arguments():
    assert main(["1", "5"]) == 84
    assert main(["3"]) == 84


def test_main_plays_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n"))
    assert main(["2", "5"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(Board(2).render())
    assert "I lost... snif... but I'll get you next time!!" in out