"""Calendar dates written as YYYY/MM/DD in the data files."""

from __future__ import annotations

import datetime as _dt
import re

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_MIN_YEAR = 1900
_MAX_YEAR = 2100


def _to_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring what follows it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _valid(year: int, month: int, day: int) -> bool:
    if not _MIN_YEAR <= year <= _MAX_YEAR:
        return False
    if not 1 <= month <= 12:
        return False
    days = _DAYS_IN_MONTH[month - 1]
    if month == 2 and _is_leap(year):
        days = 29
    return 1 <= day <= days


class Date:
    """A day between the years 1900 and 2100 inclusive."""

    __slots__ = ("year", "month", "day")

    year: int
    month: int
    day: int

    def __init__(self, year: int, month: int, day: int) -> None:
        object.__setattr__(self, "year", year)
        object.__setattr__(self, "month", month)
        object.__setattr__(self, "day", day)
        if not self.is_valid():
            raise ValueError("Invalid date.")

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Date is immutable")

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse ``YYYY/MM/DD`` or ``YYYY/M/D``."""
        parts = text.split("/", 2)
        if len(parts) < 3 or parts[2] == "":
            raise ValueError(
                "Incorrect date format. Expected YYYY/MM/DD or YYYY/M/D"
            )
        year_text, month_text, rest = parts
        day_text = rest.split("\n", 1)[0]
        try:
            year = _to_int(year_text)
            month = _to_int(month_text)
            day = _to_int(day_text)
        except ValueError:
            raise ValueError("Incorrect date format") from None
        if not _valid(year, month, day):
            raise ValueError("Invalid date")
        return cls(year, month, day)

    @classmethod
    def today(cls) -> Date:
        now = _dt.date.today()
        return cls(now.year, now.month, now.day)

    def is_valid(self) -> bool:
        return _valid(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year}/{self.month:02d}/{self.day:02d}"

    def __repr__(self) -> str:
        return f"Date({self.year}, {self.month}, {self.day})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return (self.year, self.month, self.day) == (other.year, other.month, other.day)

    def __hash__(self) -> int:
        return hash((self.year, self.month, self.day))