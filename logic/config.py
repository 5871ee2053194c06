"""
Game configuration for console TicTacToe.
Board settings and every message the game prints.
"""


class GameConfig:
    """
    Configuration class for the game engine.
    Change the message templates here to reword the game.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Symbol shown for a cell nobody has played yet
    EMPTY_CELL = " "

    # Each cell renders as "| X " plus the closing "|"
    RULE_WIDTH = BOARD_SIZE * 4 + 1  # 13 characters
    RULE_CHAR = "-"

    # ==================== MESSAGES ====================
    WELCOME = "Welcome to Tic Tac Toe!"
    INSTRUCTIONS = f"Enter moves as 'row col' (0-{BOARD_SIZE - 1})"

    PROMPT = "Player {player} turn (enter row col):"
    INVALID_MOVE = f"Invalid move! Please enter row and column (0-{BOARD_SIZE - 1})"
    READ_ERROR = "Failed to read input: {error}"

    WIN_MESSAGE = "Player {player} wins!"
    DRAW_MESSAGE = "Game is a draw!"

    @property
    def rule(self) -> str:
        """The dashed line drawn between board rows."""
        return self.RULE_CHAR * self.RULE_WIDTH
