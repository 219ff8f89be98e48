"""Calendar-day helpers for accrual ranges.

Pure date arithmetic on ``datetime.date``: no clock, no time zone, so a day
step is always exactly one calendar day.
"""

import re
from collections.abc import Iterator
from datetime import date, timedelta

from src.engine.errors import InvalidDate, InvalidDateFormat, RangeOrderError

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
ONE_DAY = timedelta(days=1)


def parse_calendar_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string.

    Raises InvalidDateFormat for anything else (including datetimes with a time
    part) and InvalidDate for well-formed strings that are not real dates.
    """
    if not isinstance(value, str) or not ISO_DATE_RE.fullmatch(value):
        raise InvalidDateFormat(value)
    year, month, day = (int(part) for part in value.split("-"))
    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDate(value) from None


def to_iso(d: date) -> str:
    return d.isoformat()


def shift_date(d: date, delta_days: int) -> date:
    """Date ``delta_days`` calendar days away (negative = earlier)."""
    return d + timedelta(days=delta_days)


class DayRange:
    """Inclusive run of calendar days. Iterable any number of times."""

    def __init__(self, start: date, end: date):
        if end < start:
            raise RangeOrderError(start, end)
        self.start = start
        self.end = end

    def __iter__(self) -> Iterator[date]:
        d = self.start
        while d <= self.end:
            yield d
            d += ONE_DAY

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def __contains__(self, item: object) -> bool:
        return isinstance(item, date) and self.start <= item <= self.end

    def __repr__(self) -> str:
        return f"DayRange({self.start.isoformat()}, {self.end.isoformat()})"


def each_day_inclusive(start: date, end: date) -> DayRange:
    return DayRange(start, end)
