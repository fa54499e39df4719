"""Pytest fixtures for echonova tests."""

from collections import deque

import pytest

from echonova import DisplaySession, reset_global_session
from echonova.progress import ProgressState
from echonova.terminal import Terminal


class FakeTerminal(Terminal):
    """Terminal that records output and cursor operations.

    Lines and keys are fed from scripted queues; reading past the end raises
    EOFError like a closed stdin.
    """

    def __init__(self, lines=(), keys="", interactive=False):
        self.progress = ProgressState()
        self.lines = deque(lines)
        self.keys = deque(keys)
        self.interactive = interactive
        self.ops = []
        self.lines_read = 0
        self.keys_read = 0
        self.cursor_visible = True

    # Output

    def write(self, text, style=None):
        self.ops.append(("write", text, style))

    def flush(self):
        self.ops.append(("flush",))

    def is_interactive(self):
        return self.interactive

    def cursor_up(self, count=1):
        self.ops.append(("up", count))

    def cursor_down(self, count=1):
        self.ops.append(("down", count))

    def cursor_forward(self, count=1):
        self.ops.append(("forward", count))

    def cursor_backward(self, count=1):
        self.ops.append(("backward", count))

    def move_to_column(self, column=0):
        self.ops.append(("column", column))

    def erase_line(self):
        self.ops.append(("erase",))

    def show_cursor(self, show=True):
        self.cursor_visible = show
        self.ops.append(("cursor", show))

    # Input

    def read_line(self):
        if not self.lines:
            raise EOFError("End of input")
        self.lines_read += 1
        return self.lines.popleft()

    def read_key(self):
        if not self.keys:
            raise EOFError("End of input")
        self.keys_read += 1
        return self.keys.popleft()

    # Helpers

    @property
    def output(self) -> str:
        """All text written so far."""
        return "".join(op[1] for op in self.ops if op[0] == "write")

    @property
    def cursor_ops(self):
        return [op for op in self.ops if op[0] not in ("write", "flush")]

    def clear(self):
        self.ops.clear()


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def make_session():
    """Factory for sessions writing to a fresh FakeTerminal.

    Usage:
        def test_something(make_session):
            session, term = make_session(verbosity=Priority.MEDIUM, lines=["y"])
    """

    def _make(lines=(), keys="", interactive=False, **kwargs):
        term = FakeTerminal(lines=lines, keys=keys, interactive=interactive)
        kwargs.setdefault("show_color", False)
        return DisplaySession(terminal=term, **kwargs), term

    return _make


@pytest.fixture(autouse=True)
def _isolate_global_session():
    yield
    reset_global_session()
