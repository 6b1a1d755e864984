# src/colordir/utils/terminal.py
import os
import sys
import termios
import tty
from typing import Callable, Optional, TextIO, Tuple

from colordir.config import DEFAULT_HEIGHT, DEFAULT_WIDTH

MORE_PROMPT = "-- More -- (any key to continue, q to quit)"


class OutputClosed(Exception):
    """Raised when the user quits at a pause prompt."""


def normalize_geometry(columns: int, rows: int) -> Tuple[int, int]:
    """Replaces non-positive dimensions (detection failure) with the defaults."""
    return (
        columns if columns > 0 else DEFAULT_WIDTH,
        rows if rows > 0 else DEFAULT_HEIGHT,
    )


def terminal_geometry(stream: Optional[TextIO] = None) -> Tuple[int, int]:
    """Returns (columns, rows) of the terminal attached to ``stream``."""
    stream = stream or sys.stdout
    try:
        size = os.get_terminal_size(stream.fileno())
    except (AttributeError, ValueError, OSError):
        return DEFAULT_WIDTH, DEFAULT_HEIGHT
    return normalize_geometry(size.columns, size.lines)


def read_key(stdin: Optional[TextIO] = None) -> str:
    """Blocks until a single key is pressed, without echo or line buffering."""
    stdin = stdin or sys.stdin
    fd = stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd, termios.TCSANOW)
        return os.read(fd, 1).decode("utf-8", errors="replace")
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


class Output:
    """
    Line sink for the listing.
    With ``page_lines`` set, it stops after that many lines and waits for a key.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        page_lines: int = 0,
        key_reader: Optional[Callable[[], str]] = None,
    ):
        self.stream = stream or sys.stdout
        self.page_lines = page_lines
        self.key_reader = key_reader or read_key
        self._lines_on_page = 0

    def line(self, text: str = "") -> None:
        for part in text.split("\n"):
            print(part, file=self.stream)
            if self.page_lines > 0:
                self._lines_on_page += 1
                if self._lines_on_page >= self.page_lines:
                    self._pause()

    def _pause(self) -> None:
        self.stream.write(MORE_PROMPT)
        self.stream.flush()
        key = self.key_reader()
        self.stream.write("\r\033[K")
        self._lines_on_page = 0
        if key.lower() == "q":
            raise OutputClosed()
