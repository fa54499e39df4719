"""Configuration management for echonova."""

import os

from utils.runtime import get_config_file

_DEFAULT_SPINNER_FRAMES = "⣷ ⣯ ⣟ ⡿ ⢿ ⣻ ⣽ ⣾"
_VERBOSITY_LEVELS = ("debug", "low", "medium", "high", "silent")

# Default configuration template
_DEFAULT_CONFIG = f"""\
# EchoNova Configuration

# Minimum priority a message needs to be shown:
# debug, low, medium, high or silent
VERBOSITY=high

# Colored and styled output
SHOW_COLOR=true

# Hide Warning, Message and Success lines (machine readable output)
SUPPRESS_MESSAGES=false

# Spinner glyphs for progress lines (exactly 8, space separated)
SPINNER_FRAMES={_DEFAULT_SPINNER_FRAMES}

# Log level used with --verbose
LOG_LEVEL=DEBUG
"""


def _load_config(path: str) -> dict[str, str]:
    """Parse a KEY=VALUE config file, skipping comments and blank lines."""
    cfg: dict[str, str] = {}
    if not os.path.isfile(path):
        return cfg
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, _, value = line.partition("=")
            # Strip inline comments (# ...) from the value
            if "#" in value:
                value = value[: value.index("#")]
            cfg[key.strip()] = value.strip()
    return cfg


def _parse_frames(value: str) -> tuple[str, ...]:
    """Split a spinner frame setting into glyphs.

    Space separated values are split on whitespace, anything else is taken
    one character per glyph.
    """
    value = value.strip()
    if " " in value:
        return tuple(value.split())
    return tuple(value)


def ensure_config() -> str:
    """Write the default config file if it does not exist yet.

    Returns:
        Path to the config file
    """
    path = get_config_file()
    if not os.path.exists(path):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(_DEFAULT_CONFIG)
    return path


_cfg = _load_config(get_config_file())


class Config:
    """Configuration for echonova.

    All configuration is centralized here. Access config values directly via Config.XXX.
    """

    # Display Configuration
    VERBOSITY = _cfg.get("VERBOSITY", "high").lower()
    SHOW_COLOR = _cfg.get("SHOW_COLOR", "true").lower() == "true"
    SUPPRESS_MESSAGES = _cfg.get("SUPPRESS_MESSAGES", "false").lower() == "true"
    SPINNER_FRAMES = _parse_frames(_cfg.get("SPINNER_FRAMES", _DEFAULT_SPINNER_FRAMES))

    # Logging Configuration
    # Note: Logging is controlled via --verbose flag
    LOG_LEVEL = _cfg.get("LOG_LEVEL", "DEBUG").upper()

    @classmethod
    def reload(cls, path: str | None = None) -> None:
        """Re-read the config file into the class attributes.

        Args:
            path: Config file to read (default: the runtime config file)
        """
        cfg = _load_config(path or get_config_file())
        cls.VERBOSITY = cfg.get("VERBOSITY", "high").lower()
        cls.SHOW_COLOR = cfg.get("SHOW_COLOR", "true").lower() == "true"
        cls.SUPPRESS_MESSAGES = cfg.get("SUPPRESS_MESSAGES", "false").lower() == "true"
        cls.SPINNER_FRAMES = _parse_frames(cfg.get("SPINNER_FRAMES", _DEFAULT_SPINNER_FRAMES))
        cls.LOG_LEVEL = cfg.get("LOG_LEVEL", "DEBUG").upper()

    @classmethod
    def validate(cls):
        """Validate configuration values.

        Raises:
            ValueError: If a configuration value is invalid
        """
        if cls.VERBOSITY not in _VERBOSITY_LEVELS:
            raise ValueError(
                f"Unknown VERBOSITY '{cls.VERBOSITY}' in {get_config_file()}.\n"
                f"Expected one of: {', '.join(_VERBOSITY_LEVELS)}"
            )

        # Deferred: the echonova package imports Config at load time
        from echonova.progress import FRAME_COUNT

        if len(cls.SPINNER_FRAMES) != FRAME_COUNT:
            raise ValueError(
                f"SPINNER_FRAMES must contain exactly {FRAME_COUNT} glyphs, "
                f"got {len(cls.SPINNER_FRAMES)}."
            )
