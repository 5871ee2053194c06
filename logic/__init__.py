"""
Logic module for console TicTacToe.
Handles the board, move parsing, and the game loop.
"""

from .config import GameConfig
from .board import Board, Player
from .moves import Move, parse_move
from .game import Game, GameStatus

__version__ = "1.0.0"
