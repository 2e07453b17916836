"""Bridge from the standard ``logging`` module to a FileLogWriter."""

import logging
import traceback

from file_logger.levels import Level


def level_for(levelno: int) -> Level:
    """Map a stdlib numeric level to a writer token."""
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARNING
    if levelno >= logging.INFO:
        return Level.INFO
    if levelno >= logging.DEBUG:
        return Level.DEBUG
    return Level.VERBOSE


class _SkipOwnRecords(logging.Filter):
    # The writer logs its own rotations; feeding those back would re-enter its lock.
    def filter(self, record):
        return not (record.name == "file_logger" or record.name.startswith("file_logger."))


class FileLoggerHandler(logging.Handler):
    """Logging handler that appends each record through a FileLogWriter.

    The logger name becomes the tag. Exception info is written as the
    exception text followed by its traceback.
    """

    def __init__(self, writer, level=logging.NOTSET):
        super().__init__(level)
        self.writer = writer
        self.addFilter(_SkipOwnRecords())

    def emit(self, record):
        try:
            error = None
            stack_trace = None
            if record.exc_info and record.exc_info[1] is not None:
                error = record.exc_info[1]
                stack_trace = "".join(traceback.format_tb(record.exc_info[2]))
            elif record.stack_info:
                stack_trace = record.stack_info
            self.writer.log(
                level_for(record.levelno),
                record.getMessage(),
                tag=record.name,
                error=error,
                stack_trace=stack_trace,
            )
        except Exception:
            self.handleError(record)

    def close(self):
        try:
            self.writer.close()
        finally:
            super().close()
