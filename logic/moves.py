"""
Move parsing for console TicTacToe.
Turns a line typed by a player into board coordinates.
"""

from typing import NamedTuple, Optional


class Move(NamedTuple):
    """A (row, col) position a player wants to mark."""
    row: int
    col: int


def parse_move(text: str) -> Optional[Move]:
    """
    Parse "row col" into a Move.

    The line must hold exactly two whitespace-separated, non-negative
    integers. Range and occupancy are checked by the board, not here.

    Args:
        text: Raw line from the player.

    Returns:
        The Move, or None if the line is malformed.
    """
    tokens = text.split()
    if len(tokens) != 2:
        return None

    # isdecimal rejects signs, so "-1" and "+1" are malformed
    if not all(token.isdecimal() for token in tokens):
        return None

    # int() refuses strings past the interpreter's digit limit
    try:
        row, col = (int(token) for token in tokens)
    except ValueError:
        return None
    return Move(row, col)
