"""Placeholder categories for suppressed messages.

When a message is hidden by the verbosity threshold, a spinner line is shown
instead so the user still sees that work is happening. The category of that
line is guessed from the hidden message with the ordered rules below; the
first matching rule wins.
"""

from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

DEFAULT_PLACEHOLDER = "Working"


@dataclass(frozen=True)
class PlaceholderRule:
    """Maps a (category, message) pattern to a placeholder category."""

    label: str
    matches: Callable[[str, str], bool]


PLACEHOLDER_RULES: Tuple[PlaceholderRule, ...] = (
    PlaceholderRule(
        "Scanning",
        lambda category, message: category == "Executing" and message.endswith("printPkgInfo"),
    ),
    PlaceholderRule("Updating", lambda category, message: message.startswith("git")),
)


def choose_placeholder(
    category: str,
    message: str,
    rules: Sequence[PlaceholderRule] = PLACEHOLDER_RULES,
) -> str:
    """Pick the placeholder category for a suppressed message."""
    for rule in rules:
        if rule.matches(category, message):
            return rule.label
    return DEFAULT_PLACEHOLDER
