"""Directory scanning: map file names in the log directory to (date, index)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator

from file_logger.dateformat import DateFormat

SEPARATOR = "_"


@dataclass(frozen=True)
class LogFileEntry:
    path: str
    name: str
    date_part: str
    date: datetime
    index: int


def split_file_name(name: str) -> tuple[str, int]:
    """Split ``<date>_<index>.<ext>`` into its date part and index.

    A missing or non-numeric index is index 0.
    """
    stem = os.path.splitext(name)[0]
    date_part, sep, index_part = stem.rpartition(SEPARATOR)
    if not sep:
        return stem, 0
    if index_part.isdecimal():
        return date_part, int(index_part)
    return date_part, 0


def scan(directory: str, file_date_format: DateFormat) -> Iterator[LogFileEntry]:
    """Yield every managed log file in ``directory``.

    Reads the directory fresh on each call. Entries whose date part does not
    parse are not log files and are skipped.
    """
    try:
        it = os.scandir(directory)
    except FileNotFoundError:
        return
    with it:
        for dir_entry in it:
            if not dir_entry.is_file():
                continue
            date_part, index = split_file_name(dir_entry.name)
            try:
                date = file_date_format.parse(date_part)
            except ValueError:
                continue
            yield LogFileEntry(
                path=dir_entry.path,
                name=dir_entry.name,
                date_part=date_part,
                date=date,
                index=index,
            )
