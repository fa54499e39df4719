"""Process-wide default display session and module-level shortcuts.

Programs that only need one session can call these functions directly
instead of creating and passing a `DisplaySession` around.
"""

from typing import Optional, Sequence

from config import Config
from utils import get_logger

from .session import DisplaySession, ErrorValue
from .types import DisplayType, ForcePrompt, Priority

logger = get_logger(__name__)

_session: Optional[DisplaySession] = None


def global_session() -> DisplaySession:
    """Get the global session, creating it from Config on first use.

    An invalid config file is logged and replaced by the default settings,
    so library calls keep working; main.py reports the error to the user.
    """
    global _session
    if _session is None:
        try:
            Config.validate()
        except ValueError as e:
            logger.warning(f"Invalid config, using defaults: {e}")
            _session = DisplaySession()
        else:
            _session = DisplaySession.from_config()
            _session.terminal.progress.set_frames(Config.SPINNER_FRAMES)
    return _session


def reset_global_session(session: Optional[DisplaySession] = None) -> None:
    """Replace the global session. None recreates it from Config on next use."""
    global _session
    _session = session


def display(
    category: str,
    message: str,
    display_type: DisplayType = DisplayType.MESSAGE,
    priority: Priority = Priority.MEDIUM,
) -> None:
    global_session().display(category, message, display_type, priority)


def display_warning(message: ErrorValue, priority: Priority = Priority.HIGH) -> None:
    global_session().display_warning(message, priority)


def display_hint(message: str, priority: Priority = Priority.HIGH) -> None:
    global_session().display_hint(message, priority)


def display_details(message: ErrorValue, priority: Priority = Priority.HIGH) -> None:
    global_session().display_details(message, priority)


def display_success(message: str, priority: Priority = Priority.HIGH) -> None:
    global_session().display_success(message, priority)


def display_error(message: ErrorValue, priority: Priority = Priority.HIGH) -> None:
    global_session().display_error(message, priority)


def display_info(message: str, priority: Priority = Priority.HIGH) -> None:
    global_session().display_info(message, priority)


def display_progress(message: str, priority: Priority = Priority.HIGH) -> None:
    global_session().display_progress(message, priority)


def display_debug(category_or_message: str, message: Optional[str] = None) -> None:
    global_session().display_debug(category_or_message, message)


def display_tip() -> None:
    global_session().display_tip()


def display_line_reset() -> None:
    global_session().display_line_reset()


def prompt(force: ForcePrompt, question: str) -> bool:
    return global_session().prompt(force, question)


def prompt_custom(force: ForcePrompt, question: str, default: str = "") -> str:
    return global_session().prompt_custom(force, question, default)


def prompt_list(force: ForcePrompt, question: str, options: Sequence[str]) -> Optional[str]:
    return global_session().prompt_list(force, question, options)


def set_verbosity(level: Priority) -> None:
    global_session().set_verbosity(level)


def set_show_color(value: bool) -> None:
    global_session().set_show_color(value)


def set_suppress_messages(value: bool) -> None:
    global_session().set_suppress_messages(value)


def set_spinner_frames(frames: Sequence[str]) -> None:
    """Replace the spinner glyphs of the global session's terminal."""
    global_session().terminal.progress.set_frames(frames)
