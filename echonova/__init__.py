"""echonova: message display with progress indicators and prompts.

This package provides:
- Priority-filtered, color-coded status lines with aligned categories
- Warning deduplication and a summary of suppressed messages
- Spinner lines that redraw in place
- Yes/no, free-text and keyboard-driven list prompts
"""

from .errors import DisplayError, PromptCancelled
from .globals import (
    display,
    display_debug,
    display_details,
    display_error,
    display_hint,
    display_info,
    display_line_reset,
    display_progress,
    display_success,
    display_tip,
    display_warning,
    global_session,
    prompt,
    prompt_custom,
    prompt_list,
    reset_global_session,
    set_show_color,
    set_spinner_frames,
    set_suppress_messages,
    set_verbosity,
)
from .session import DisplaySession
from .terminal import Terminal, get_terminal
from .types import DisplayType, ForcePrompt, Priority

__all__ = [
    # Types
    "Priority",
    "DisplayType",
    "ForcePrompt",
    "DisplayError",
    "PromptCancelled",
    # Session
    "DisplaySession",
    "Terminal",
    "get_terminal",
    # Global session
    "global_session",
    "reset_global_session",
    "display",
    "display_warning",
    "display_hint",
    "display_details",
    "display_success",
    "display_error",
    "display_info",
    "display_progress",
    "display_debug",
    "display_tip",
    "display_line_reset",
    "prompt",
    "prompt_custom",
    "prompt_list",
    "set_verbosity",
    "set_show_color",
    "set_suppress_messages",
    "set_spinner_frames",
]
