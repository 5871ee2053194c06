"""
Board for console TicTacToe.
Tracks which player has marked each cell and checks for wins and draws.
"""

from enum import Enum
from typing import Optional

import numpy as np

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class Board:
    """
    The 3x3 TicTacToe grid.

    Each cell holds the empty symbol or a player's mark. Cells are only
    ever written through apply_move, so a marked cell never goes back to
    empty.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Create an empty board.

        Args:
            config: Game configuration (board size, empty symbol).
        """
        self.config = config or GameConfig()
        self.size = self.config.BOARD_SIZE
        self.cells = np.full(
            (self.size, self.size), self.config.EMPTY_CELL, dtype="<U1"
        )

    def is_valid_move(self, row: int, col: int) -> bool:
        """
        Check if a position is on the board and still empty.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if a mark can be placed there.
        """
        # Negative indices would wrap around in numpy
        if not (0 <= row < self.size and 0 <= col < self.size):
            return False
        return bool(self.cells[row, col] == self.config.EMPTY_CELL)

    def apply_move(self, row: int, col: int, player: Player):
        """
        Place a player's mark. The move must already be validated
        with is_valid_move.
        """
        self.cells[row, col] = player.value

    def cell(self, row: int, col: int) -> Optional[Player]:
        """
        Get the player who marked a cell, or None if it is empty.
        Inspection helper for callers and tests; the game itself only
        needs is_valid_move.
        """
        value = str(self.cells[row, col])
        if value == self.config.EMPTY_CELL:
            return None
        return Player(value)

    def is_winner(self, player: Player) -> bool:
        """
        Check if a player owns a full row, column, or diagonal.

        Args:
            player: The player to check.

        Returns:
            True if any line is entirely that player's mark.
        """
        marks = self.cells == player.value

        if marks.all(axis=1).any():   # rows
            return True
        if marks.all(axis=0).any():   # columns
            return True

        return bool(
            np.diagonal(marks).all()
            or np.diagonal(np.fliplr(marks)).all()
        )

    def is_draw(self) -> bool:
        """
        Check if every cell is filled.
        Check is_winner first: a full board can still hold a winning line.
        """
        return bool((self.cells != self.config.EMPTY_CELL).all())

    def render(self) -> str:
        """Draw the board as text, one dash rule above and below each row."""
        rule = self.config.rule
        lines = []
        for row in self.cells:
            lines.append(rule)
            lines.append("|" + "".join(f" {cell} |" for cell in row))
        lines.append(rule)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    for row, col in [(0, 0), (1, 1), (2, 2)]:
        board.apply_move(row, col, Player.X)
    board.apply_move(0, 2, Player.O)

    print(board)
    print(f"X wins: {board.is_winner(Player.X)}")
    print(f"O wins: {board.is_winner(Player.O)}")
    print(f"Draw: {board.is_draw()}")

    print("\nBoard test done!")
