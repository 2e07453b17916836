"""Serialized log writer with daily rollover, size cap and retention."""

from __future__ import annotations

import asyncio
import logging
import os
import threading
from datetime import datetime

from file_logger.config import WriterConfig
from file_logger.dateformat import DateFormat
from file_logger.formatters import LogRecord, format_record
from file_logger.levels import coerce_level
from file_logger.paths import logs_directory, resolve_base_directory
from file_logger.retention import prune
from file_logger.selector import select
from file_logger.state import ActiveFile

logger = logging.getLogger(__name__)


class FileLogWriter:
    """Appends records to ``<base>/logs/<date>_<index>.<ext>``.

    Initialization, the day/size check, rollover and the append itself all
    run under one lock, so concurrent ``log`` calls never interleave lines
    or race on choosing the next file.
    """

    def __init__(self, config: WriterConfig | None = None, time_func=None, base_dir_provider=None):
        self._config = config or WriterConfig()
        self._time_func = time_func or datetime.now
        self._base_dir_provider = base_dir_provider or resolve_base_directory
        self._file_date_format = DateFormat(self._config.file_date_format)
        self._log_date_format = DateFormat(self._config.log_date_format)
        self._lock = threading.Lock()
        self._directory: str | None = None
        self._active: ActiveFile | None = None

    @property
    def config(self) -> WriterConfig:
        return self._config

    @property
    def directory(self) -> str | None:
        """The resolved log directory, or None before the first write."""
        return self._directory

    @property
    def active_path(self) -> str | None:
        return self._active.path if self._active else None

    def _initialize(self, now: datetime):
        base_dir = self._config.base_dir or self._base_dir_provider()
        directory = logs_directory(base_dir)
        os.makedirs(directory, exist_ok=True)
        self._rotate(directory, now)
        self._directory = directory
        logger.info("Logging to %s", directory)

    def _rotate(self, directory: str, now: datetime, purge: bool = True):
        previous, self._active = self._active, None
        if previous is not None:
            previous.close()

        if purge:
            deleted = prune(directory, now, self._config.number_of_days, self._file_date_format)
            if deleted:
                logger.info("Purged %d file(s): %s", len(deleted), ", ".join(deleted))

        path = select(
            directory,
            now,
            self._config.max_size,
            self._file_date_format,
            self._config.file_extension,
        )
        self._active = ActiveFile(path, now.date())
        if previous is not None:
            logger.info("Rotated: %s -> %s", previous.path, path)

    def log(self, level, message: str, tag: str | None = None, error=None, stack_trace=None):
        """Append one record. Levels outside ``config.levels`` are dropped."""
        level = coerce_level(level)
        if level not in self._config.levels:
            return

        with self._lock:
            now = self._time_func()
            if self._active is None:
                self._initialize(now)
            elif not self._active.is_valid(now):
                self._rotate(self._directory, now)
            elif self._config.max_size is not None and self._active.exceeds(self._config.max_size_bytes):
                self._rotate(self._directory, now, purge=False)

            record = LogRecord(level, message, tag, error, stack_trace, created=now)
            self._active.write(format_record(record, self._log_date_format))

    def close(self):
        """Close the open file. A later ``log`` reopens it in append mode."""
        with self._lock:
            if self._active is not None:
                self._active.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class AsyncFileLogWriter:
    """asyncio front for FileLogWriter.

    The asyncio lock stays held across the awaited append, so coroutines
    are served one complete record at a time without blocking the loop.
    """

    def __init__(self, writer: FileLogWriter | None = None, **kwargs):
        self._writer = writer or FileLogWriter(**kwargs)
        self._lock = asyncio.Lock()

    @property
    def writer(self) -> FileLogWriter:
        return self._writer

    @property
    def directory(self) -> str | None:
        return self._writer.directory

    async def log(self, level, message: str, tag: str | None = None, error=None, stack_trace=None):
        async with self._lock:
            await asyncio.to_thread(self._writer.log, level, message, tag, error, stack_trace)

    async def close(self):
        async with self._lock:
            await asyncio.to_thread(self._writer.close)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()
