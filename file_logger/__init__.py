"""Daily-rotating, size-bounded, self-pruning log-file writer."""

from file_logger.config import WriterConfig, load_config
from file_logger.exceptions import ConfigError, FileLoggerError, UnsupportedPlatformError
from file_logger.handler import FileLoggerHandler
from file_logger.levels import ALL_LEVELS, Level
from file_logger.writer import AsyncFileLogWriter, FileLogWriter

__all__ = [
    "ALL_LEVELS",
    "AsyncFileLogWriter",
    "ConfigError",
    "FileLogWriter",
    "FileLoggerError",
    "FileLoggerHandler",
    "Level",
    "UnsupportedPlatformError",
    "WriterConfig",
    "load_config",
]
