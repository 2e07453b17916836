"""Textual rendering of a single log record."""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import datetime
from types import TracebackType

from file_logger.dateformat import DateFormat
from file_logger.levels import Level


@dataclass
class LogRecord:
    level: Level
    message: str
    tag: str | None = None
    error: object | None = None
    stack_trace: str | TracebackType | None = None
    created: datetime = field(default_factory=datetime.now)


def _stack_text(stack_trace) -> str:
    if isinstance(stack_trace, TracebackType):
        return "".join(traceback.format_tb(stack_trace))
    return str(stack_trace)


def format_record(record: LogRecord, date_format: DateFormat) -> str:
    """Render ``<timestamp> [<tag->]<level>]:<message>`` plus optional error lines."""
    parts = [date_format.format(record.created), " ["]
    if record.tag is not None:
        parts.append(record.tag)
        parts.append("-")
    parts.append(record.level.value)
    parts.append("]:")
    parts.append(record.message)
    parts.append("\n")

    if record.error is not None:
        parts.append(str(record.error))
        parts.append("\n")

    if record.stack_trace is not None:
        parts.append(_stack_text(record.stack_trace).rstrip("\n"))
        parts.append("\n")

    return "".join(parts)
