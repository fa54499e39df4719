"""Error values understood by the display session.

Any exception can be rendered: its message, an optional ``hint`` attribute and
the chain of wrapped causes (``raise ... from ...``) are read through the
helpers below, so rendering code never inspects concrete exception types.
"""

from typing import Iterator, Optional


class DisplayError(Exception):
    """An error carrying a hint for the user."""

    def __init__(self, message: str, hint: str = "", cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint
        if cause is not None:
            self.__cause__ = cause


class PromptCancelled(KeyboardInterrupt):
    """Raised when the user interrupts an interactive selection with Ctrl-C."""

    pass


def error_message(error: BaseException) -> str:
    """Get the user-facing message of an error.

    Errors raised without a message are named by their type instead.
    """
    message = getattr(error, "message", None)
    if not isinstance(message, str):
        message = str(error)
    return message or type(error).__name__


def error_hint(error: BaseException) -> str:
    """Get the hint attached to an error, or an empty string."""
    hint = getattr(error, "hint", "")
    return hint if isinstance(hint, str) else ""


def error_cause(error: BaseException) -> Optional[BaseException]:
    """Get the error wrapped by ``error``, if any."""
    return error.__cause__


def iter_causes(error: BaseException) -> Iterator[BaseException]:
    """Yield every wrapped cause of ``error``, innermost last.

    Stops when a cause repeats so a cyclic chain cannot loop forever.
    """
    seen = {id(error)}
    cause = error_cause(error)
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        yield cause
        cause = error_cause(cause)
