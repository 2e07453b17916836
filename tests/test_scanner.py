"""Tests for directory scanning and file name parsing."""

import types
from datetime import datetime

import pytest

from file_logger.scanner import scan, split_file_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("2024-01-03_2.txt", ("2024-01-03", 2)),
        ("2024-01-03_0.log", ("2024-01-03", 0)),
        ("2024-01-01_abc.txt", ("2024-01-01", 0)),
        ("2024-01-03.txt", ("2024-01-03", 0)),
        ("2024-01-03_-1.txt", ("2024-01-03", 0)),
        ("2024_01_03_12.txt", ("2024_01_03", 12)),
    ],
)
def test_split_file_name(name, expected):
    assert split_file_name(name) == expected


class TestScan:
    def test_parses_managed_files(self, log_dir, touch, file_date_format):
        touch(log_dir, "2024-01-03_0.txt")
        touch(log_dir, "2024-01-03_4.txt")
        touch(log_dir, "2024-01-01_abc.txt")

        entries = sorted(scan(str(log_dir), file_date_format), key=lambda e: e.name)

        assert [(e.name, e.date, e.index) for e in entries] == [
            ("2024-01-01_abc.txt", datetime(2024, 1, 1), 0),
            ("2024-01-03_0.txt", datetime(2024, 1, 3), 0),
            ("2024-01-03_4.txt", datetime(2024, 1, 3), 4),
        ]
        assert entries[0].date_part == "2024-01-01"
        assert entries[0].path == str(log_dir / "2024-01-01_abc.txt")

    def test_skips_unmanaged_entries(self, log_dir, touch, file_date_format):
        touch(log_dir, "notes.txt")
        touch(log_dir, "README")
        touch(log_dir, "2024-01-03_1.txt")
        (log_dir / "2024-01-02_0.txt").mkdir()

        names = [e.name for e in scan(str(log_dir), file_date_format)]

        assert names == ["2024-01-03_1.txt"]

    def test_missing_directory_is_empty(self, tmp_path, file_date_format):
        assert list(scan(str(tmp_path / "absent"), file_date_format)) == []

    def test_scan_is_lazy_and_fresh(self, log_dir, touch, file_date_format):
        result = scan(str(log_dir), file_date_format)
        assert isinstance(result, types.GeneratorType)
        touch(log_dir, "2024-01-03_0.txt")
        assert len(list(scan(str(log_dir), file_date_format))) == 1
