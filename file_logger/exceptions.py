"""Exception types raised by the file logger."""


class FileLoggerError(Exception):
    """Base class for file logger errors."""


class ConfigError(FileLoggerError, ValueError):
    """Raised when a writer configuration value is invalid."""


class UnsupportedPlatformError(FileLoggerError):
    """Raised when no writable base directory can be resolved."""
