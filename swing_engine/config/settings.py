"""
Configuration management for the swing engine
"""
import os

from swing_engine.exceptions import ConfigurationError

# Library default when no strength is given
DEFAULT_STRENGTH = 5


def _read_strength(raw: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"SWING_STRENGTH must be an integer, got {raw!r}")
    if value < 1:
        raise ConfigurationError(f"SWING_STRENGTH must be >= 1, got {value}")
    return value


# Swing Detection
SWING_STRENGTH = _read_strength(os.getenv("SWING_STRENGTH", str(DEFAULT_STRENGTH)))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("LOG_JSON", "true").strip().lower() in ("1", "true", "yes", "on")
