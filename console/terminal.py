"""
Terminal input and output for TicTacToe.
Wraps the process's standard streams so the game never touches them directly.
"""

import sys
from typing import Optional, TextIO


class TerminalReader:
    """
    Reads one line of player input at a time.
    Blocks until a full line is available.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize the reader.

        Args:
            stream: Text stream to read from (default: stdin).
        """
        self.stream = stream or sys.stdin

    def read_line(self) -> str:
        """
        Read the next line, without its trailing newline.

        Returns:
            The line the player typed.

        Raises:
            EOFError: The input stream is closed.
            OSError: The stream could not be read or decoded.
        """
        raw = getattr(self.stream, "buffer", None)
        if raw is None:
            line = self.stream.readline()
        else:
            # Decode one line at a time so a bad line does not take the
            # rest of the buffered input with it
            data = raw.readline()
            try:
                line = data.decode(self.stream.encoding or "utf-8")
            except UnicodeDecodeError as e:
                raise OSError(f"Input is not valid text: {e}") from e
        if not line:
            raise EOFError("No more input")
        return line.rstrip("\r\n")


class TerminalDisplay:
    """Prints game text to stdout and error notices to stderr."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def show(self, text: str):
        print(text, file=self.out, flush=True)

    def error(self, text: str):
        print(text, file=self.err, flush=True)
