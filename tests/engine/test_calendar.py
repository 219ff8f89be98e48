from datetime import date

import pytest

from src.engine.calendar import (
    each_day_inclusive,
    parse_calendar_date,
    shift_date,
    to_iso,
)
from src.engine.errors import InvalidDate, InvalidDateFormat, RangeOrderError


class TestParseCalendarDate:
    def test_valid(self):
        assert parse_calendar_date("2026-01-06") == date(2026, 1, 6)

    def test_leap_day(self):
        assert parse_calendar_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize("raw", [
        "2026-1-6",
        "06/01/2026",
        "2026-01-06T00:00:00",
        " 2026-01-06",
        "",
        "20260106",
    ])
    def test_rejects_bad_format(self, raw):
        with pytest.raises(InvalidDateFormat):
            parse_calendar_date(raw)

    def test_rejects_non_string(self):
        with pytest.raises(InvalidDateFormat):
            parse_calendar_date(20260106)

    @pytest.mark.parametrize("raw", ["2025-02-29", "2026-13-01", "2026-04-31", "2026-00-10"])
    def test_rejects_impossible_date(self, raw):
        with pytest.raises(InvalidDate):
            parse_calendar_date(raw)

    def test_iso_roundtrip(self):
        assert to_iso(parse_calendar_date("2026-03-08")) == "2026-03-08"


class TestEachDayInclusive:
    def test_ten_days(self):
        days = list(each_day_inclusive(date(2026, 1, 1), date(2026, 1, 10)))
        assert len(days) == 10
        assert days[0] == date(2026, 1, 1)
        assert days[-1] == date(2026, 1, 10)

    def test_single_day(self):
        assert list(each_day_inclusive(date(2026, 1, 1), date(2026, 1, 1))) == [date(2026, 1, 1)]

    def test_restartable(self):
        days = each_day_inclusive(date(2026, 1, 1), date(2026, 1, 5))
        assert list(days) == list(days)
        assert len(days) == 5

    def test_crosses_dst_and_month_end(self):
        # US DST starts 2026-03-08; calendar stepping is unaffected
        days = list(each_day_inclusive(date(2026, 3, 7), date(2026, 4, 1)))
        assert len(days) == 26
        assert date(2026, 3, 8) in days
        assert date(2026, 3, 31) in days

    def test_leap_february(self):
        days = each_day_inclusive(date(2024, 2, 1), date(2024, 3, 1))
        assert len(days) == 30
        assert date(2024, 2, 29) in days

    def test_reversed_range_raises(self):
        with pytest.raises(RangeOrderError):
            each_day_inclusive(date(2026, 1, 10), date(2026, 1, 1))


class TestShiftDate:
    def test_back_five(self):
        assert shift_date(date(2026, 1, 6), -5) == date(2026, 1, 1)

    def test_year_rollover(self):
        assert shift_date(date(2026, 1, 2), -5) == date(2025, 12, 28)

    def test_leap_day_rollover(self):
        assert shift_date(date(2024, 3, 1), -1) == date(2024, 2, 29)
        assert shift_date(date(2025, 3, 1), -1) == date(2025, 2, 28)

    def test_forward(self):
        assert shift_date(date(2025, 12, 30), 3) == date(2026, 1, 2)

    def test_zero(self):
        assert shift_date(date(2026, 1, 6), 0) == date(2026, 1, 6)
