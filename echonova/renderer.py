"""Line rendering and the progress-line redraw protocol.

A progress line is written with a trailing newline like any other line. The
next write first moves the cursor back up and erases it, so a sequence of
progress lines animates in place instead of scrolling the terminal.
"""

from utils import get_logger

from .terminal import Terminal
from .theme import Theme
from .types import DisplayType, Priority

logger = get_logger(__name__)

# Width of the widest standard category; labels are right-aligned to it
LONGEST_CATEGORY = len("Downloading")

CONTINUATION_CATEGORY = "..."
SUPPRESSED_MARKER = "+"


def align_category(category: str) -> str:
    """Right-align a category label so message bodies share one column."""
    return f"{category.rjust(LONGEST_CATEGORY)} "


class LineRenderer:
    """Writes category-labelled lines to a terminal."""

    def __init__(self, terminal: Terminal):
        self.terminal = terminal

    @property
    def progress(self):
        return self.terminal.progress

    def reset(self) -> None:
        """Erase the last line if it was a progress line."""
        if not self.progress.last_line_was_progress:
            return
        try:
            self.terminal.cursor_up(1)
            self.terminal.erase_line()
        except OSError as e:
            logger.debug(f"Could not erase progress line: {e}")
        self.progress.last_line_was_progress = False

    def write_category(
        self,
        category: str,
        display_type: DisplayType,
        priority: Priority,
        show_color: bool,
    ) -> None:
        """Write an aligned category label, leaving the cursor after it."""
        text = align_category(category)
        if show_color:
            self.terminal.write(text, Theme.category_style(display_type, priority))
        else:
            self.terminal.write(text)

    def write_formatted(self, text: str, display_type: DisplayType, show_color: bool) -> None:
        """Write raw text in the color of a display type."""
        if show_color:
            self.terminal.write(text, Theme.text_style(display_type))
        else:
            self.terminal.write(text)

    def write_line(
        self,
        category: str,
        line: str,
        display_type: DisplayType,
        priority: Priority,
        *,
        show_color: bool,
        suppressed: bool,
    ) -> None:
        """Write one physical line.

        Args:
            category: Label shown before the line
            line: Message text without line breaks
            display_type: Selects the label color, PROGRESS adds a spinner
            priority: Selects the label style
            show_color: Whether to style the label
            suppressed: Write only a marker character instead of the line
        """
        self.reset()

        if suppressed:
            self.terminal.write(SUPPRESSED_MARKER)
            return

        self.write_category(category, display_type, priority, show_color)

        if display_type != DisplayType.PROGRESS:
            self.terminal.write(f"{line}\n")
            return

        self.terminal.write(f"{self.progress.next_frame()} {line}\n")
        self.terminal.flush()
        self.progress.last_line_was_progress = True
