"""The file currently receiving appends and the day it was chosen for."""

from __future__ import annotations

import os
from datetime import date, datetime


class ActiveFile:
    """Append target for one calendar day.

    Never mutated into a different path or day: rotation builds a new
    ActiveFile and closes this one. The handle is opened lazily so a
    selected-but-unwritten file does not exist on disk.
    """

    def __init__(self, path: str, opened_for: date):
        self.path = path
        self.opened_for = opened_for
        self._file = None

    def is_valid(self, now: datetime) -> bool:
        return now.date() == self.opened_for

    def exceeds(self, max_bytes: int) -> bool:
        try:
            return os.path.getsize(self.path) > max_bytes
        except OSError:
            return False

    def write(self, text: str):
        if self._file is None or self._file.closed:
            self._file = open(self.path, "a", encoding="utf-8")
        self._file.write(text)
        self._file.flush()
        os.fsync(self._file.fileno())

    def close(self):
        if self._file and not self._file.closed:
            self._file.close()
        self._file = None

    def __repr__(self):
        return f"ActiveFile(path={self.path!r}, opened_for={self.opened_for!r})"
