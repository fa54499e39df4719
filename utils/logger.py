"""File logging for echonova.

Nothing is logged unless `setup_logger()` installs the file handler, which
main.py does only with --verbose. The terminal itself is never a log target:
log lines would land between a progress line and the cursor movement that
erases it.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .runtime import get_log_dir

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_file_handler: Optional[logging.FileHandler] = None


def _resolve_level(name: Optional[str]) -> int:
    if name is None:
        # Deferred: config imports utils.runtime, which loads this package
        from config import Config

        name = Config.LOG_LEVEL
    level = getattr(logging, name.upper(), None)
    return level if isinstance(level, int) else logging.DEBUG


def setup_logger(log_dir: Optional[str] = None, log_level: Optional[str] = None) -> str:
    """Start writing log records to a timestamped file.

    Calling it again keeps the existing file.

    Args:
        log_dir: Directory for log files (default: .echonova/logs/)
        log_level: Level name such as DEBUG or INFO (default: Config.LOG_LEVEL);
            unknown names mean DEBUG

    Returns:
        Path of the log file
    """
    global _file_handler

    if _file_handler is not None:
        return _file_handler.baseFilename

    level = _resolve_level(log_level)
    log_path = Path(log_dir or get_log_dir())
    log_path.mkdir(exist_ok=True, parents=True)
    log_file = log_path / f"echonova_{datetime.now():%Y%m%d_%H%M%S}.log"

    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logging.root.setLevel(level)
    logging.root.addHandler(handler)
    _file_handler = handler

    logging.getLogger(__name__).info(
        f"Logging to {handler.baseFilename} at {logging.getLevelName(level)}"
    )
    return handler.baseFilename


def shutdown_logger() -> None:
    """Close the log file and stop file logging."""
    global _file_handler

    if _file_handler is None:
        return
    logging.root.removeHandler(_file_handler)
    _file_handler.close()
    _file_handler = None


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a module (typically ``__name__``)."""
    return logging.getLogger(name)


def get_log_file_path() -> Optional[str]:
    """Path of the current log file, or None when file logging is off."""
    return _file_handler.baseFilename if _file_handler is not None else None
