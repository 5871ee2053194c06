"""
Game flow for console TicTacToe.
Asks players for moves, applies them, and decides when the game is over.
"""

from enum import Enum
from typing import Optional

from console.terminal import TerminalDisplay, TerminalReader

from .board import Board, Player
from .config import GameConfig
from .moves import Move, parse_move


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class Game:
    """
    One game of TicTacToe between two players at the same terminal.

    Game flow:
    1. Show the board
    2. Ask the current player for a move until a legal one is entered
    3. Place the mark
    4. Stop if that move won or filled the board, otherwise switch players

    The reader and display are the only ways the game talks to the
    outside world, so tests can swap them for scripted ones.
    """

    def __init__(self, reader=None, display=None, config: Optional[GameConfig] = None):
        """
        Initialize the game.

        Args:
            reader: Object with read_line() (default: the terminal).
            display: Object with show(text) and error(text) (default: the terminal).
            config: Game configuration.
        """
        self.config = config or GameConfig()
        self.reader = reader or TerminalReader()
        self.display = display or TerminalDisplay()

        self.board = Board(self.config)
        self.current_player = Player.X
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.move_count = 0

    def acquire_move(self) -> Move:
        """
        Keep asking the current player until they enter a legal move.

        Read errors and malformed lines are reported and retried; there
        is no retry limit. Blocks on the reader with no timeout.
        End of input is the only way out besides a legal move: the
        reader's EOFError passes straight through.

        Returns:
            A Move that is on the board and points at an empty cell.

        Raises:
            EOFError: The reader has no more input.
        """
        while True:
            self.display.show(
                self.config.PROMPT.format(player=self.current_player.value)
            )

            try:
                line = self.reader.read_line()
            except OSError as e:
                self.display.error(self.config.READ_ERROR.format(error=e))
                continue

            move = parse_move(line)
            if move is not None and self.board.is_valid_move(move.row, move.col):
                return move

            self.display.show(self.config.INVALID_MOVE)

    def switch_player(self):
        """Hand the turn to the other player."""
        self.current_player = self.current_player.opposite()

    def play_move(self, row: int, col: int) -> GameStatus:
        """
        Place the current player's mark and update the game status.

        The move must already be validated. A move that fills the last
        cell and completes a line counts as a win, not a draw.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The status after the move.
        """
        self.board.apply_move(row, col, self.current_player)
        self.move_count += 1

        if self.board.is_winner(self.current_player):
            self.status = GameStatus.WON
            self.winner = self.current_player
        elif self.board.is_draw():
            self.status = GameStatus.DRAW
        else:
            self.switch_player()

        return self.status

    def run(self) -> GameStatus:
        """Play until someone wins or the board fills up."""
        while self.status == GameStatus.IN_PROGRESS:
            self.display.show("\n" + self.board.render())

            row, col = self.acquire_move()
            self.play_move(row, col)

        # Final board and result
        self.display.show("\n" + self.board.render())
        if self.status == GameStatus.WON:
            self.display.show(self.config.WIN_MESSAGE.format(player=self.winner.value))
        else:
            self.display.show(self.config.DRAW_MESSAGE)

        return self.status
