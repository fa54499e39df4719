"""Runtime directory management for echonova.

Runtime data lives under the .echonova/ directory of the working directory:
- config: Configuration file (written by `echonova-demo --init-config`)
- logs/: Log files (only created with --verbose)
"""

import os

RUNTIME_DIR = ".echonova"


def get_config_file() -> str:
    """Get the configuration file path.

    The ECHONOVA_CONFIG environment variable overrides the default location.

    Returns:
        Path to .echonova/config
    """
    return os.environ.get("ECHONOVA_CONFIG") or os.path.join(RUNTIME_DIR, "config")


def get_log_dir() -> str:
    """Get the log directory path.

    Returns:
        Path to .echonova/logs/
    """
    return os.path.join(RUNTIME_DIR, "logs")


def ensure_runtime_dirs(create_logs: bool = False) -> None:
    """Ensure runtime directories exist.

    Args:
        create_logs: Whether to create the logs directory (for --verbose mode)
    """
    os.makedirs(RUNTIME_DIR, exist_ok=True)

    if create_logs:
        os.makedirs(get_log_dir(), exist_ok=True)
