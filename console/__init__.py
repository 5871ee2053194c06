"""
Console module for TicTacToe.
Reads moves from and writes the board to the terminal.
"""

from .terminal import TerminalReader, TerminalDisplay
