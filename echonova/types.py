"""Core enumerations shared by the display session, renderer and prompts."""

from enum import Enum, IntEnum


class Priority(IntEnum):
    """Verbosity level of a message.

    A message is shown only when its priority is at least the session's
    verbosity threshold, so the ordering of the members matters.
    """

    DEBUG = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    SILENT = 4

    @classmethod
    def parse(cls, name: str) -> "Priority":
        """Look up a priority by case-insensitive name.

        Args:
            name: Priority name such as "debug" or "High"

        Raises:
            ValueError: If the name is not a known priority
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(p.name.lower() for p in cls)
            raise ValueError(f"Unknown priority: {name!r}. Available: {choices}") from None


class DisplayType(IntEnum):
    """Semantic category of a message, selects its color.

    Everything from WARNING onwards counts as non-essential output.
    """

    ERROR = 0
    WARNING = 1
    DETAILS = 2
    HINT = 3
    MESSAGE = 4
    SUCCESS = 5
    PROGRESS = 6


class ForcePrompt(Enum):
    """Whether a prompt waits for the user or answers itself."""

    DONT_FORCE = "dont_force"
    FORCE_YES = "force_yes"
    FORCE_NO = "force_no"
