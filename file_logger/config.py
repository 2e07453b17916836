"""Writer configuration: frozen dataclass loaded from YAML and environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import yaml

from file_logger.dateformat import (
    DEFAULT_FILE_DATE_FORMAT,
    DEFAULT_LOG_DATE_FORMAT,
    DateFormat,
)
from file_logger.exceptions import ConfigError
from file_logger.levels import ALL_LEVELS, Level, coerce_level
from file_logger.selector import SIZE_UNIT

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class WriterConfig:
    levels: frozenset[Level] = ALL_LEVELS
    number_of_days: int | None = 1  # None disables retention
    max_size: int | None = None  # units of 1,000,000 bytes; None disables the cap
    file_date_format: str = DEFAULT_FILE_DATE_FORMAT
    log_date_format: str = DEFAULT_LOG_DATE_FORMAT
    file_extension: str = "txt"
    base_dir: str | None = None  # None asks the platform

    def __post_init__(self):
        try:
            levels = frozenset(coerce_level(v) for v in self.levels)
        except ValueError as e:
            raise ConfigError(str(e)) from None
        object.__setattr__(self, "levels", levels)
        if not self.levels:
            raise ConfigError("At least one log level must be accepted")
        if self.number_of_days is not None and (not _is_int(self.number_of_days) or self.number_of_days < 1):
            raise ConfigError(
                "The number of days must be None (auto-clean disabled) or >= 1"
            )
        if self.max_size is not None and (not _is_int(self.max_size) or self.max_size < 1):
            raise ConfigError("The max size must be None (max-size disabled) or >= 1")
        if not self.file_extension or "." in self.file_extension:
            raise ConfigError(f"Invalid file extension: {self.file_extension!r}")
        for pattern in (self.file_date_format, self.log_date_format):
            if not pattern:
                raise ConfigError("Date formats must not be empty")
            try:
                DateFormat(pattern)
            except ValueError as e:
                raise ConfigError(str(e)) from None

    @property
    def max_size_bytes(self) -> int | None:
        if self.max_size is None:
            return None
        return self.max_size * SIZE_UNIT


def _parse_optional_int(value, name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("", "none", "null", "off"):
            return None
        value = text
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer or 'none', got {value!r}") from None


def _parse_levels(value) -> frozenset:
    if isinstance(value, str):
        value = value.replace(",", " ").split()
    return frozenset(value)


def load_yaml_config(path: str | None) -> dict:
    """Load writer settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.info("Loaded YAML config from %s", path)
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


_ENV_KEYS = {
    "levels": "LOG_LEVELS",
    "number_of_days": "LOG_NUMBER_OF_DAYS",
    "max_size": "LOG_MAX_SIZE",
    "file_date_format": "LOG_FILE_DATE_FORMAT",
    "log_date_format": "LOG_DATE_FORMAT",
    "file_extension": "LOG_FILE_EXTENSION",
    "base_dir": "LOG_BASE_DIR",
}


def load_config(yaml_path: str | None = None, environ=None) -> WriterConfig:
    """Build WriterConfig from defaults, then the YAML file, then env vars."""
    environ = os.environ if environ is None else environ
    values = dict(load_yaml_config(yaml_path))

    unknown = set(values) - set(_ENV_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    for key, env_name in _ENV_KEYS.items():
        if env_name in environ:
            values[key] = environ[env_name]

    kwargs = {}
    if "levels" in values:
        kwargs["levels"] = _parse_levels(values["levels"])
    for key in ("number_of_days", "max_size"):
        if key in values:
            kwargs[key] = _parse_optional_int(values[key], key)
    for key in ("file_date_format", "log_date_format", "file_extension", "base_dir"):
        if key in values and values[key] is not None:
            kwargs[key] = str(values[key])
    return WriterConfig(**kwargs)
