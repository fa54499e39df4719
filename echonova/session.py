"""Display session: priority filtering, warning dedup and message rendering."""

from typing import Optional, Sequence, Set, Tuple, Union

from config import Config
from utils import get_logger

from .errors import error_hint, error_message, iter_causes
from .heuristics import choose_placeholder
from .prompts import PromptEngine
from .renderer import CONTINUATION_CATEGORY, LineRenderer
from .terminal import Terminal, get_terminal
from .types import DisplayType, ForcePrompt, Priority

logger = get_logger(__name__)

ErrorValue = Union[str, BaseException]


class DisplaySession:
    """Shows categorized messages filtered by a verbosity threshold.

    Attributes:
        verbosity: Messages below this priority are suppressed
        show_color: Whether labels and text are styled
        suppress_messages: Hide Warning, Message and Success output, for
            commands whose output should be machine readable
        suppression_count: Number of messages hidden by the threshold
    """

    def __init__(
        self,
        verbosity: Priority = Priority.HIGH,
        show_color: bool = True,
        suppress_messages: bool = False,
        terminal: Optional[Terminal] = None,
    ):
        self.verbosity = verbosity
        self.show_color = show_color
        self.suppress_messages = suppress_messages
        self.suppression_count = 0
        self._warnings: Set[Tuple[str, str]] = set()
        self._terminal = terminal
        self.prompts = PromptEngine(self)

    @classmethod
    def from_config(cls, terminal: Optional[Terminal] = None) -> "DisplaySession":
        """Create a session from the values in Config."""
        return cls(
            verbosity=Priority.parse(Config.VERBOSITY),
            show_color=Config.SHOW_COLOR,
            suppress_messages=Config.SUPPRESS_MESSAGES,
            terminal=terminal,
        )

    @property
    def terminal(self) -> Terminal:
        """The session's terminal, or the shared process-wide one."""
        return self._terminal if self._terminal is not None else get_terminal()

    @property
    def renderer(self) -> LineRenderer:
        return LineRenderer(self.terminal)

    # Settings

    def set_verbosity(self, level: Priority) -> None:
        self.verbosity = level

    def set_show_color(self, value: bool) -> None:
        self.show_color = value

    def set_suppress_messages(self, value: bool) -> None:
        self.suppress_messages = value

    def is_suppressed(self, display_type: DisplayType) -> bool:
        """Whether a line of this type is hidden by message suppression.

        Warning, Message and Success output is hidden when suppression is on,
        unless the user asked for more verbose output.
        """
        return (
            self.suppress_messages
            and display_type >= DisplayType.WARNING
            and self.verbosity == Priority.HIGH
        )

    # Core display

    def display(
        self,
        category: str,
        message: str,
        display_type: DisplayType = DisplayType.MESSAGE,
        priority: Priority = Priority.MEDIUM,
    ) -> None:
        """Display a message, one line per non-empty line of ``message``.

        Args:
            category: Label shown before the first line
            message: Message text, may span several lines
            display_type: Semantic type, selects the color
            priority: Compared against the session verbosity
        """
        # Multiple warnings containing the same messages should not be shown
        if display_type == DisplayType.WARNING:
            warning = (category, message)
            if warning in self._warnings:
                return
            self._warnings.add(warning)

        if priority < self.verbosity:
            if priority != Priority.DEBUG:
                self.suppression_count += 1
            logger.debug(f"Suppressed {priority.name} message: {category} {message}")
            if self.show_color and self.verbosity != Priority.SILENT:
                self._display_line(
                    choose_placeholder(category, message), "", DisplayType.PROGRESS, Priority.HIGH
                )
            return

        lines = [line for line in message.splitlines() if line]
        for i, line in enumerate(lines):
            self._display_line(
                category if i == 0 else CONTINUATION_CATEGORY, line, display_type, priority
            )

    def _display_line(
        self, category: str, line: str, display_type: DisplayType, priority: Priority
    ) -> None:
        self.renderer.write_line(
            category,
            line,
            display_type,
            priority,
            show_color=self.show_color,
            suppressed=self.is_suppressed(display_type),
        )

    def display_category(
        self, category: str, display_type: DisplayType, priority: Priority
    ) -> None:
        """Write an aligned category label without a line break."""
        if self.is_suppressed(display_type):
            return
        self.renderer.write_category(category, display_type, priority, self.show_color)

    def display_line_reset(self) -> None:
        """Erase the previous line if it was a progress line."""
        self.renderer.reset()

    def display_formatted(self, display_type: DisplayType, *messages: str) -> None:
        """Write raw text in the color of ``display_type``, without a label."""
        renderer = self.renderer
        for message in messages:
            renderer.write_formatted(message, display_type, self.show_color)

    def display_info_line(self, field: str, message: str) -> None:
        """Write a "field message" pair on its own line."""
        self.display_formatted(DisplayType.SUCCESS, field)
        self.display_formatted(DisplayType.DETAILS, message)
        self.display_formatted(DisplayType.HINT, "\n")

    # Typed helpers

    def display_warning(self, message: ErrorValue, priority: Priority = Priority.HIGH) -> None:
        self._display_error_value("Warning:", message, DisplayType.WARNING, priority)

    def display_hint(self, message: str, priority: Priority = Priority.HIGH) -> None:
        self.display("Hint:", message, DisplayType.HINT, priority)

    def display_details(self, message: ErrorValue, priority: Priority = Priority.HIGH) -> None:
        if isinstance(message, BaseException):
            self.display("Details:", error_message(message), DisplayType.DETAILS, priority)
            self._display_causes(message, priority)
        else:
            self.display("Details:", message, DisplayType.DETAILS, priority)

    def display_success(self, message: str, priority: Priority = Priority.HIGH) -> None:
        self.display("Success:", message, DisplayType.SUCCESS, priority)

    def display_error(self, message: ErrorValue, priority: Priority = Priority.HIGH) -> None:
        self._display_error_value("Error:", message, DisplayType.ERROR, priority)

    def display_info(self, message: str, priority: Priority = Priority.HIGH) -> None:
        self.display("Info:", message, DisplayType.MESSAGE, priority)

    def display_progress(self, message: str, priority: Priority = Priority.HIGH) -> None:
        """Display a message on a spinner line that the next write replaces."""
        self.display("Progress:", message, DisplayType.PROGRESS, priority)

    def display_debug(self, category_or_message: str, message: Optional[str] = None) -> None:
        """Display a debug message.

        ``display_debug(msg)`` uses the "Debug:" category,
        ``display_debug(category, msg)`` a custom one.
        """
        if message is None:
            category, message = "Debug:", category_or_message
        else:
            category = category_or_message
        self.display(category, message, priority=Priority.DEBUG)

    def _display_error_value(
        self, category: str, error: ErrorValue, display_type: DisplayType, priority: Priority
    ) -> None:
        if not isinstance(error, BaseException):
            self.display(category, error, display_type, priority)
            return

        self.display(category, error_message(error), display_type, priority)
        hint = error_hint(error)
        if hint:
            self.display_hint(hint, priority)
        self._display_causes(error, priority)

    def _display_causes(self, error: BaseException, priority: Priority) -> None:
        for cause in iter_causes(error):
            self.display("Details:", error_message(cause), DisplayType.DETAILS, priority)

    def display_tip(self) -> None:
        """Tell the user how many messages were suppressed, if any."""
        if self.suppression_count > 0:
            message = (
                f"{self.suppression_count} messages have been suppressed, "
                "use --verbose to show them."
            )
            self.display("Tip:", message, DisplayType.WARNING, Priority.HIGH)

    # Prompts

    def prompt(self, force: ForcePrompt, question: str) -> bool:
        return self.prompts.prompt(force, question)

    def prompt_custom(self, force: ForcePrompt, question: str, default: str = "") -> str:
        return self.prompts.prompt_custom(force, question, default)

    def prompt_list(
        self, force: ForcePrompt, question: str, options: Sequence[str]
    ) -> Optional[str]:
        return self.prompts.prompt_list(force, question, options)
