"""Severity tokens accepted by the writer."""

from enum import Enum

from file_logger.exceptions import ConfigError


class Level(str, Enum):
    DEBUG = "D"
    INFO = "I"
    WARNING = "W"
    ERROR = "E"
    VERBOSE = "V"


ALL_LEVELS = frozenset(Level)


def coerce_level(value) -> Level:
    """Accept a Level, a one-letter token ("W") or a member name ("warning")."""
    if isinstance(value, Level):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return Level(text.upper())
        except ValueError:
            pass
        try:
            return Level[text.upper()]
        except KeyError:
            pass
    raise ConfigError(f"Unknown log level: {value!r}")
