"""
Tests for parsing typed moves.
"""

import pytest

from logic.moves import Move, parse_move


@pytest.mark.parametrize("text, expected", [
    ("1 1", (1, 1)),
    ("0 2\n", (0, 2)),
    ("  2\t0  ", (2, 0)),
    ("7 9", (7, 9)),  # out of range is the board's call
])
def test_parses_two_integers(text, expected):
    assert parse_move(text) == expected


def test_returns_move_with_named_fields():
    move = parse_move("2 1")
    assert isinstance(move, Move)
    assert move.row == 2
    assert move.col == 1


@pytest.mark.parametrize("text", [
    "",
    "abc",
    "1",
    "1 2 3",
    "1 a",
    "1,1",
    "-1 0",
    "+1 0",
    "1.0 2",
])
def test_malformed_input_is_rejected(text):
    assert parse_move(text) is None


def test_token_past_digit_limit_is_rejected():
    assert parse_move("1" * 5000 + " 0") is None
