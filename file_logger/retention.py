"""Retention enforcement: delete log files older than the configured window."""

from __future__ import annotations

import logging
import os
from datetime import date, datetime, timedelta

from file_logger.dateformat import DateFormat
from file_logger.scanner import scan

logger = logging.getLogger(__name__)


def min_retained_date(today: datetime, number_of_days: int) -> date:
    """Oldest calendar day kept when retaining ``number_of_days`` days."""
    return today.date() - timedelta(days=number_of_days - 1)


def prune(
    directory: str,
    today: datetime,
    number_of_days: int | None,
    file_date_format: DateFormat,
) -> list[str]:
    """Delete files dated before the retention window. Returns deleted names."""
    if number_of_days is None:
        return []

    cutoff = min_retained_date(today, number_of_days)
    deleted = []
    for entry in scan(directory, file_date_format):
        if entry.date.date() >= cutoff:
            continue
        try:
            os.remove(entry.path)
        except OSError as e:
            logger.warning("Could not delete stale log file %s: %s", entry.path, e)
            continue
        logger.debug("Deleted stale log file %s", entry.name)
        deleted.append(entry.name)
    return deleted
