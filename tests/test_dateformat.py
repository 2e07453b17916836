"""Tests for the date pattern formatter/parser."""

from datetime import datetime

import pytest

from file_logger.dateformat import (
    DEFAULT_FILE_DATE_FORMAT,
    DEFAULT_LOG_DATE_FORMAT,
    DateFormat,
)


class TestFormat:
    def test_default_file_pattern(self):
        assert DateFormat(DEFAULT_FILE_DATE_FORMAT).format(datetime(2024, 1, 3, 22, 15)) == "2024-01-03"

    def test_default_log_pattern(self):
        fmt = DateFormat(DEFAULT_LOG_DATE_FORMAT)
        assert fmt.format(datetime(2024, 1, 3, 14, 5, 9)) == "01/03/2024 14:05:09"

    def test_twelve_hour_clock(self):
        fmt = DateFormat("hh:mm a")
        assert fmt.format(datetime(2024, 1, 3, 15, 4)) == "03:04 PM"
        assert fmt.format(datetime(2024, 1, 3, 0, 30)) == "12:30 AM"

    def test_milliseconds(self):
        fmt = DateFormat("ss.SSS")
        assert fmt.format(datetime(2024, 1, 1, 0, 0, 5, 123456)) == "05.123"

    def test_fraction_width_follows_pattern(self):
        value = datetime(2024, 1, 1, 0, 0, 5, 987654)
        assert DateFormat("S").format(value) == "9"
        assert DateFormat("SS").format(value) == "98"
        assert DateFormat("SSSSSS").format(value) == "987654"
        assert DateFormat("SSSSSSS").format(value) == "9876540"

    def test_unpadded_fields(self):
        assert DateFormat("d/M/yy").format(datetime(2024, 3, 7)) == "7/3/24"

    def test_quoted_literals(self):
        assert DateFormat("yyyy'T'HH").format(datetime(2024, 1, 3, 7)) == "2024T07"
        assert DateFormat("HH''mm").format(datetime(2024, 1, 3, 7, 5)) == "07'05"
        assert DateFormat("'day' dd").format(datetime(2024, 1, 3)) == "day 03"


class TestParse:
    def test_parse_file_date(self):
        assert DateFormat("yyyy-MM-dd").parse("2024-01-03") == datetime(2024, 1, 3)

    def test_parse_rejects_non_dates(self):
        fmt = DateFormat("yyyy-MM-dd")
        for text in ("notes", "2024-13-01", "2024-01-03-extra", ""):
            with pytest.raises(ValueError):
                fmt.parse(text)

    def test_parse_milliseconds(self):
        parsed = DateFormat("yyyy-MM-dd HH:mm:ss.SSS").parse("2024-01-03 10:00:05.123")
        assert parsed == datetime(2024, 1, 3, 10, 0, 5, 123000)

    def test_percent_is_literal(self):
        assert DateFormat("yyyy%MM").parse("2024%01") == datetime(2024, 1, 1)

    def test_format_then_parse_same_day(self):
        fmt = DateFormat("yyyyMMdd")
        assert fmt.parse(fmt.format(datetime(2023, 12, 31, 23, 59))) == datetime(2023, 12, 31)


class TestPatternErrors:
    def test_unsupported_letter(self):
        with pytest.raises(ValueError):
            DateFormat("yyyy-QQ")

    def test_unterminated_quote(self):
        with pytest.raises(ValueError):
            DateFormat("yyyy 'oops")
