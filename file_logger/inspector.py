"""Inspector logic: list, read, and search managed log files."""

import os

from file_logger.dateformat import DateFormat
from file_logger.scanner import LogFileEntry, scan


def list_log_files(log_dir: str, file_date_format: DateFormat) -> list[LogFileEntry]:
    """Return managed log files sorted oldest-first by (date, index)."""
    return sorted(scan(log_dir, file_date_format), key=lambda e: (e.date, e.index))


def read_file(log_dir: str, filename: str) -> str:
    path = os.path.join(log_dir, filename)
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def search_files(log_dir: str, text: str, file_date_format: DateFormat) -> list[tuple[str, int, str]]:
    """Search for text across all log files. Returns (filename, line_num, line) tuples."""
    results = []
    for entry in list_log_files(log_dir, file_date_format):
        try:
            with open(entry.path, "r", encoding="utf-8", errors="replace") as f:
                for line_num, line in enumerate(f, 1):
                    if text in line:
                        results.append((entry.name, line_num, line.rstrip("\n")))
        except OSError:
            continue
    return results
