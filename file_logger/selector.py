"""Choose the file that today's records are appended to."""

from __future__ import annotations

import os
from datetime import datetime
from typing import Iterable

from file_logger.dateformat import DateFormat
from file_logger.scanner import SEPARATOR, LogFileEntry, scan

SIZE_UNIT = 1_000_000  # bytes per configured max_size unit


def file_name(date_part: str, index: int, extension: str) -> str:
    return f"{date_part}{SEPARATOR}{index}.{extension}"


def today_indices(entries: Iterable[LogFileEntry], today_part: str) -> list[int]:
    return [entry.index for entry in entries if entry.date_part == today_part]


def select(
    directory: str,
    today: datetime,
    max_size: int | None,
    file_date_format: DateFormat,
    extension: str = "txt",
) -> str:
    """Return the path today's records belong in.

    The highest index for today is current. With a size cap, a current file
    already larger than ``max_size * SIZE_UNIT`` bytes yields the next index,
    which need not exist yet.
    """
    today_part = file_date_format.format(today)
    indices = today_indices(scan(directory, file_date_format), today_part)
    current = max(indices) if indices else 0

    path = os.path.join(directory, file_name(today_part, current, extension))
    if max_size is None:
        return path

    if os.path.isfile(path) and os.path.getsize(path) > max_size * SIZE_UNIT:
        path = os.path.join(directory, file_name(today_part, current + 1, extension))
    return path
