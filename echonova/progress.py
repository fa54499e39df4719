"""Spinner state for progress lines.

There is exactly one physical cursor, so this state belongs to the terminal
and is shared by every display session writing to it.
"""

from typing import Sequence, Tuple

# Spinner animation frames
DEFAULT_FRAMES: Tuple[str, ...] = ("⣷", "⣯", "⣟", "⡿", "⢿", "⣻", "⣽", "⣾")
FRAME_COUNT = len(DEFAULT_FRAMES)


class ProgressState:
    """Tracks the spinner frame and whether the last line was a progress line."""

    def __init__(self, frames: Sequence[str] = DEFAULT_FRAMES):
        self.frames: Tuple[str, ...] = DEFAULT_FRAMES
        self.frame_index = 0
        self.last_line_was_progress = False
        self.set_frames(frames)

    def set_frames(self, frames: Sequence[str]) -> None:
        """Replace the spinner glyphs.

        Args:
            frames: Exactly FRAME_COUNT glyphs

        Raises:
            ValueError: If the number of glyphs is wrong
        """
        frames = tuple(frames)
        if len(frames) != FRAME_COUNT:
            raise ValueError(f"Expected {FRAME_COUNT} spinner frames, got {len(frames)}")
        self.frames = frames
        self.frame_index %= FRAME_COUNT

    def next_frame(self) -> str:
        """Return the current glyph and advance to the next one."""
        frame = self.frames[self.frame_index]
        self.frame_index = (self.frame_index + 1) % len(self.frames)
        return frame
