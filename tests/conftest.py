"""Shared pytest fixtures for the file logger test suite."""

from __future__ import annotations

import os
from datetime import datetime, timedelta

import pytest

from file_logger.config import WriterConfig
from file_logger.dateformat import DateFormat
from file_logger.writer import FileLogWriter


class FakeClock:
    """Callable clock the tests move forward by hand."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


def _touch(directory, name: str, size: int = 0) -> str:
    """Create ``name`` in ``directory`` with the given byte length."""
    path = os.path.join(str(directory), name)
    with open(path, "wb") as f:
        f.truncate(size)
    return path


@pytest.fixture()
def touch():
    return _touch


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 3, 10, 0, 0))


@pytest.fixture()
def file_date_format() -> DateFormat:
    return DateFormat("yyyy-MM-dd")


@pytest.fixture()
def log_dir(tmp_path):
    path = tmp_path / "logs"
    path.mkdir()
    return path


@pytest.fixture()
def make_writer(tmp_path, clock):
    """Factory for writers rooted at tmp_path (files land in tmp_path/logs)."""
    writers = []

    def _make(**overrides) -> FileLogWriter:
        overrides.setdefault("base_dir", str(tmp_path))
        writer = FileLogWriter(WriterConfig(**overrides), time_func=clock)
        writers.append(writer)
        return writer

    yield _make
    for writer in writers:
        writer.close()
