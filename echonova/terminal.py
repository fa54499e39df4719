"""Terminal I/O boundary.

Every byte echonova writes or reads goes through a `Terminal`. Output is
rendered by a Rich console; cursor movement uses Rich control codes, which
Rich drops when the console is not attached to a terminal. Single keypresses
are read with the input stream in raw mode.
"""

import sys
from contextlib import contextmanager
from typing import Generator, Optional, TextIO, Union

from prompt_toolkit.input import Input, create_input
from rich.console import Console
from rich.control import Control, ControlType
from rich.style import Style

from .progress import ProgressState

StyleType = Union[str, Style, None]


class Terminal:
    """Styled output, cursor control and raw input for one physical terminal."""

    def __init__(
        self,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
        progress: Optional[ProgressState] = None,
    ):
        """Initialize the terminal.

        Args:
            console: Rich console used for output (default: stdout console)
            stdin: Input stream for lines and keys (default: sys.stdin)
            progress: Spinner state (default: a fresh ProgressState)
        """
        self.console = console or Console(highlight=False)
        self._stdin = stdin
        self.progress = progress or ProgressState()
        self._input: Optional[Input] = None

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    # Output

    def write(self, text: str, style: StyleType = None) -> None:
        """Write text without a trailing newline.

        Rich would expand tabs relative to the start of each write, so they
        are passed through unchanged and the terminal places its own tab stops.
        """
        for i, part in enumerate(text.split("\t")):
            if i:
                self.console.file.write("\t")
            if part:
                self.console.out(part, style=style, highlight=False, end="")

    def flush(self) -> None:
        self.console.file.flush()

    def is_interactive(self) -> bool:
        """Whether output goes to an interactive terminal."""
        return self.console.is_terminal

    # Cursor control

    def cursor_up(self, count: int = 1) -> None:
        if count > 0:
            self.console.control(Control.move(y=-count))

    def cursor_down(self, count: int = 1) -> None:
        if count > 0:
            self.console.control(Control.move(y=count))

    def cursor_forward(self, count: int = 1) -> None:
        if count > 0:
            self.console.control(Control.move(x=count))

    def cursor_backward(self, count: int = 1) -> None:
        if count > 0:
            self.console.control(Control.move(x=-count))

    def move_to_column(self, column: int = 0) -> None:
        self.console.control(Control.move_to_column(column))

    def erase_line(self) -> None:
        """Erase the whole row the cursor is on."""
        self.console.control(Control((ControlType.ERASE_IN_LINE, 2)))

    def show_cursor(self, show: bool = True) -> None:
        self.console.show_cursor(show)

    @contextmanager
    def hidden_cursor(self) -> Generator[None, None, None]:
        """Hide the cursor, restoring it on every exit path."""
        self.show_cursor(False)
        try:
            yield
        finally:
            self.show_cursor(True)
            self.flush()

    # Input

    def read_line(self) -> str:
        """Read one line of input without the line terminator.

        Raises:
            EOFError: If the input stream is exhausted
        """
        if self._stdin is None:
            return self.console.input()
        line = self._stdin.readline()
        if not line:
            raise EOFError("End of input")
        return line.rstrip("\r\n")

    def read_key(self) -> str:
        """Block until a single key is pressed and return its character.

        The input stream is switched to raw mode only for the duration of the
        read, so Ctrl-C arrives as "\\x03" instead of a signal.

        Raises:
            EOFError: If the input stream is exhausted
        """
        if self._input is None:
            self._input = create_input(self.stdin)
        with self._input.raw_mode():
            key = self.stdin.read(1)
        if not key:
            raise EOFError("End of input")
        return key


_default_terminal: Optional[Terminal] = None


def get_terminal() -> Terminal:
    """Get the process-wide terminal shared by sessions without their own."""
    global _default_terminal
    if _default_terminal is None:
        _default_terminal = Terminal()
    return _default_terminal


def set_terminal(terminal: Optional[Terminal]) -> None:
    """Replace the process-wide terminal (None recreates it on next use)."""
    global _default_terminal
    _default_terminal = terminal
