"""Color and style table for display types and priorities.

Green is only shown when the requested operation is successful, red when it
fails with an error, and yellow for warnings. Blue emphasizes keywords such
as "Downloading" or "Reading".
Low priority text is dim, high priority text is bright, medium is normal.
"""

from dataclasses import dataclass
from typing import Dict

from rich.style import Style

from .types import DisplayType, Priority


@dataclass(frozen=True)
class ThemeColors:
    """Foreground color for each display type."""

    error: str
    warning: str
    details: str
    hint: str
    message: str
    success: str
    progress: str


DEFAULT_COLORS = ThemeColors(
    error="red",
    warning="yellow",
    details="blue",
    hint="white",
    message="cyan",
    success="green",
    progress="magenta",
)

PRIORITY_STYLES: Dict[Priority, Style] = {
    Priority.DEBUG: Style(dim=True),
    Priority.LOW: Style(dim=True),
    Priority.MEDIUM: Style(),
    Priority.HIGH: Style(bold=True),
}

HIGHLIGHT_STYLE = Style(bold=True)
MUTED_STYLE = Style(dim=True)


class Theme:
    """Lookup helpers over the color table."""

    _colors: ThemeColors = DEFAULT_COLORS

    @classmethod
    def color_for(cls, display_type: DisplayType) -> str:
        """Get the foreground color name for a display type."""
        return getattr(cls._colors, display_type.name.lower())

    @classmethod
    def text_style(cls, display_type: DisplayType) -> Style:
        """Style for message text of a display type (color only)."""
        return Style(color=cls.color_for(display_type))

    @classmethod
    def priority_style(cls, priority: Priority) -> Style:
        """Style for a priority. SILENT never renders, it maps to no style."""
        return PRIORITY_STYLES.get(priority, Style())

    @classmethod
    def category_style(cls, display_type: DisplayType, priority: Priority) -> Style:
        """Style for a category label.

        Debug labels are dim and keep the terminal's default color.
        """
        if priority == Priority.DEBUG:
            return cls.priority_style(priority)
        return cls.text_style(display_type) + cls.priority_style(priority)
