"""Date patterns in the ``yyyy-MM-dd`` style used for file names and log lines."""

from __future__ import annotations

from datetime import datetime

DEFAULT_FILE_DATE_FORMAT = "yyyy-MM-dd"
DEFAULT_LOG_DATE_FORMAT = "MM/dd/yyyy HH:mm:ss"


def _render(letter: str, width: int, value: datetime) -> str:
    if letter == "y":
        return f"{value.year % 100:02d}" if width == 2 else f"{value.year:04d}"
    if letter == "M":
        if width >= 4:
            return value.strftime("%B")
        if width == 3:
            return value.strftime("%b")
        return f"{value.month:0{width}d}"
    if letter == "d":
        return f"{value.day:0{width}d}"
    if letter == "H":
        return f"{value.hour:0{width}d}"
    if letter == "h":
        return f"{(value.hour % 12) or 12:0{width}d}"
    if letter == "m":
        return f"{value.minute:0{width}d}"
    if letter == "s":
        return f"{value.second:0{width}d}"
    if letter == "S":
        return f"{value.microsecond:06d}"[:width].ljust(width, "0")
    if letter == "a":
        return "AM" if value.hour < 12 else "PM"
    if letter == "E":
        return value.strftime("%A" if width >= 4 else "%a")
    raise AssertionError(letter)


def _directive(letter: str, width: int) -> str:
    if letter == "y":
        return "%y" if width == 2 else "%Y"
    if letter == "M":
        if width >= 4:
            return "%B"
        return "%b" if width == 3 else "%m"
    if letter == "E":
        return "%A" if width >= 4 else "%a"
    return {
        "d": "%d",
        "H": "%H",
        "h": "%I",
        "m": "%M",
        "s": "%S",
        "S": "%f",
        "a": "%p",
    }[letter]


_SUPPORTED = frozenset("yMdHhmsSaE")


def _tokenize(pattern: str) -> list[tuple]:
    """Split a pattern into ("field", letter, width) and ("literal", text) parts."""
    parts: list = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            if pattern[i + 1:i + 2] == "'":
                parts.append(("literal", "'"))
                i += 2
                continue
            text = []
            j = i + 1
            while True:
                if j >= n:
                    raise ValueError(f"Unterminated quote in date pattern {pattern!r}")
                if pattern[j] == "'":
                    if pattern[j + 1:j + 2] == "'":
                        text.append("'")
                        j += 2
                        continue
                    break
                text.append(pattern[j])
                j += 1
            parts.append(("literal", "".join(text)))
            i = j + 1
        elif ch.isalpha():
            if ch not in _SUPPORTED:
                raise ValueError(f"Unsupported pattern letter {ch!r} in {pattern!r}")
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            parts.append(("field", ch, j - i))
            i = j
        else:
            parts.append(("literal", ch))
            i += 1
    return parts


class DateFormat:
    """Formats and parses datetimes with an ICU-style pattern.

    Only the pattern letters needed for log file names and log line
    timestamps are understood: ``y M d H h m s S a E``. Text inside single
    quotes is literal and ``''`` is a literal quote. ``S`` runs give the
    fraction of a second truncated to the run width (``SSS`` is milliseconds).
    """

    def __init__(self, pattern: str):
        self.pattern = pattern
        self._parts = _tokenize(pattern)
        self._strptime = "".join(
            part[1].replace("%", "%%") if part[0] == "literal" else _directive(part[1], part[2])
            for part in self._parts
        )

    def format(self, value: datetime) -> str:
        out = []
        for part in self._parts:
            if part[0] == "literal":
                out.append(part[1])
            else:
                out.append(_render(part[1], part[2], value))
        return "".join(out)

    def parse(self, text: str) -> datetime:
        """Parse ``text``; raises ValueError when it does not match the pattern."""
        return datetime.strptime(text, self._strptime)

    def __repr__(self):
        return f"DateFormat({self.pattern!r})"
