"""
Main entry point for console TicTacToe.

Two players share one terminal. Player X moves first; each move is
typed as "row col", for example "1 1" for the center cell.

Run this script to play!
"""

from console import TerminalDisplay, TerminalReader
from logic import Game, GameConfig


def main():
    """Main entry point."""
    config = GameConfig()
    display = TerminalDisplay()

    display.show(config.WELCOME)
    display.show(config.INSTRUCTIONS)

    game = Game(reader=TerminalReader(), display=display, config=config)

    try:
        game.run()
    except KeyboardInterrupt:
        display.show("\n\nGame interrupted by user.")
    except EOFError:
        display.show("\n\nInput closed, game abandoned.")
    finally:
        display.show("Goodbye!")


if __name__ == "__main__":
    main()
