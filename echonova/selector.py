"""Keyboard-driven list selection.

The interactive selector draws the options in rows reserved below the
prompt and redraws them in place on every keypress: Tab or Down selects the
next option, Up the previous one, Enter confirms and Ctrl-C cancels.
Terminals that are not interactive get a line-based fallback instead.
"""

from enum import Enum
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from utils import get_logger

from .errors import PromptCancelled
from .renderer import LONGEST_CATEGORY
from .theme import HIGHLIGHT_STYLE, MUTED_STYLE
from .types import DisplayType, Priority

if TYPE_CHECKING:
    from .session import DisplaySession

logger = get_logger(__name__)

TAB = "\t"
ENTER = ("\r", "\n")
CTRL_C = "\x03"
ESCAPE = "\x1b"
CSI_BRACKET = "["
ARROW_UP = "A"
ARROW_DOWN = "B"

SELECT_INSTRUCTIONS = "Cycle with 'Tab', 'Enter' when done"


class SelectorState(Enum):
    """States of the interactive selector."""

    RENDERING = "rendering"
    AWAITING_KEY = "awaiting_key"
    SELECTED = "selected"
    CANCELLED = "cancelled"


class InteractiveSelector:
    """Choose one of several options with the keyboard."""

    def __init__(self, session: "DisplaySession", question: str, options: Sequence[str]):
        if not options:
            raise ValueError("Cannot select from an empty list of options")
        self.session = session
        self.question = question
        self.options: List[str] = list(options)
        self.index = 0
        self.state = SelectorState.RENDERING

    @property
    def terminal(self):
        return self.session.terminal

    @property
    def current(self) -> str:
        return self.options[self.index]

    def _move(self, step: int) -> SelectorState:
        self.index = (self.index + step) % len(self.options)
        return SelectorState.RENDERING

    def handle_key(self, key: str, read_next: Callable[[], str]) -> SelectorState:
        """Apply one keypress and return the next state.

        Args:
            key: The key that was pressed
            read_next: Reads the following key, used for escape sequences

        Returns:
            RENDERING if the selection moved, AWAITING_KEY if the key was
            ignored, SELECTED or CANCELLED when the selection is over
        """
        if key == TAB:
            return self._move(1)
        if key in ENTER:
            return SelectorState.SELECTED
        if key == CTRL_C:
            return SelectorState.CANCELLED
        if key == ESCAPE:
            if read_next() != CSI_BRACKET:
                return SelectorState.AWAITING_KEY
            code = read_next()
            if code == ARROW_UP:
                return self._move(-1)
            if code == ARROW_DOWN:
                return self._move(1)
        return SelectorState.AWAITING_KEY

    def render(self) -> None:
        """Draw every option, leaving the cursor on the first row."""
        terminal = self.terminal
        for i, option in enumerate(self.options):
            if i == self.index:
                text, style = f"> {option} <", HIGHLIGHT_STYLE
            else:
                text, style = f"  {option}  ", MUTED_STYLE
            terminal.write(text, style if self.session.show_color else None)
            # Back to the start of the row, then down to the next one
            terminal.cursor_backward(len(text))
            terminal.cursor_down(1)
        terminal.cursor_up(len(self.options))
        terminal.flush()

    def _reserve_rows(self) -> None:
        # Writing the rows first keeps redraws from scrolling when the
        # cursor is at the bottom of the terminal
        count = len(self.options)
        self.terminal.write("\n" * count)
        self.terminal.cursor_up(count)
        self.terminal.cursor_forward(LONGEST_CATEGORY + 1)

    def _clear_rows(self) -> None:
        count = len(self.options)
        for _ in range(count):
            self.terminal.erase_line()
            self.terminal.cursor_down(1)
        self.terminal.cursor_up(count)
        self.terminal.move_to_column(0)

    def run(self) -> str:
        """Show the selector and block until an option is chosen.

        Returns:
            The chosen option

        Raises:
            PromptCancelled: If the user pressed Ctrl-C
        """
        session = self.session
        terminal = self.terminal
        session.display("Prompt:", self.question, DisplayType.WARNING, Priority.HIGH)
        session.display("Select", SELECT_INSTRUCTIONS, DisplayType.MESSAGE, Priority.HIGH)
        session.display_category("Choices:", DisplayType.WARNING, Priority.HIGH)
        self._reserve_rows()

        with terminal.hidden_cursor():
            self.state = SelectorState.RENDERING
            while self.state is SelectorState.RENDERING:
                self.render()
                self.state = SelectorState.AWAITING_KEY
                while self.state is SelectorState.AWAITING_KEY:
                    self.state = self.handle_key(terminal.read_key(), terminal.read_key)

            if self.state is SelectorState.CANCELLED:
                logger.info(f"Selection cancelled: {self.question}")
                raise PromptCancelled("Keyboard interrupt")

            self._clear_rows()

        session.display("Answer:", self.current, DisplayType.WARNING, Priority.HIGH)
        return self.current


def fallback_select(
    session: "DisplaySession", question: str, options: Sequence[str]
) -> Optional[str]:
    """Ask for an option by name on terminals without raw key input.

    Returns:
        The option matching the typed answer case-insensitively, or None
    """
    session.display(
        "Prompt:", f"{question} [{'/'.join(options)}]", DisplayType.WARNING, Priority.HIGH
    )
    session.display_category("Answer:", DisplayType.WARNING, Priority.HIGH)
    answer = session.terminal.read_line().strip()
    for option in options:
        if option.casefold() == answer.casefold():
            return option
    logger.debug(f"Answer {answer!r} matches none of {list(options)}")
    return None
