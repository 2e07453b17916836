"""Platform-specific base directory for log storage."""

import os
import sys

from file_logger.exceptions import UnsupportedPlatformError

APP_DIR_NAME = "file_logger"
LOGS_SUBDIR = "logs"
BASE_DIR_ENV = "FILE_LOGGER_BASE_DIR"


def resolve_base_directory(app_name: str = APP_DIR_NAME) -> str:
    """Return a writable per-user data directory for ``app_name``.

    Windows: %LOCALAPPDATA%/<app_name>
    macOS:   ~/Library/Application Support/<app_name>
    Linux:   $XDG_DATA_HOME/<app_name> or ~/.local/share/<app_name>

    ``FILE_LOGGER_BASE_DIR`` overrides the platform choice. The directory is
    not created here.
    """
    override = os.environ.get(BASE_DIR_ENV)
    if override:
        return os.path.abspath(os.path.expanduser(override))

    if sys.platform == "win32":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if not base:
            raise UnsupportedPlatformError("Neither LOCALAPPDATA nor APPDATA is set")
        return os.path.join(base, app_name)

    if sys.platform == "darwin":
        return os.path.join(os.path.expanduser("~"), "Library", "Application Support", app_name)

    if sys.platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
        base = os.environ.get("XDG_DATA_HOME") or os.path.join(
            os.path.expanduser("~"), ".local", "share"
        )
        return os.path.join(base, app_name)

    raise UnsupportedPlatformError(f"Platform is not supported: {sys.platform}")


def logs_directory(base_dir: str) -> str:
    return os.path.join(base_dir, LOGS_SUBDIR)
