"""Utility modules for echonova."""

from .logger import get_log_file_path, get_logger, setup_logger, shutdown_logger

# Note: Runtime functions are NOT exported here to avoid circular imports.
# Import directly from utils.runtime when needed:
#   from utils.runtime import get_config_file, get_log_dir, etc.

__all__ = [
    "setup_logger",
    "shutdown_logger",
    "get_logger",
    "get_log_file_path",
]
