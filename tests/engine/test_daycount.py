from datetime import date
from decimal import Decimal

import pytest

from src.engine.daycount import (
    day_count_fraction,
    days_in_year,
    is_leap_year,
    normalize_day_count,
)
from src.engine.errors import UnsupportedDayCount
from src.models.accrual import DayCount


class TestLeapYear:
    @pytest.mark.parametrize("year", [2024, 2000, 2028, 1600])
    def test_leap(self, year):
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [2025, 2026, 1900, 2100])
    def test_not_leap(self, year):
        assert not is_leap_year(year)

    def test_days_in_year(self):
        assert days_in_year(date(2024, 7, 1)) == 366
        assert days_in_year(date(2025, 7, 1)) == 365


class TestDayCountFraction:
    @pytest.mark.parametrize("d", [date(2024, 2, 29), date(2025, 6, 15), date(2026, 12, 31)])
    def test_act_360_fixed(self, d):
        assert day_count_fraction(d, DayCount.ACT_360) == Decimal(1) / Decimal(360)

    def test_act_act_leap(self):
        for d in (date(2024, 1, 1), date(2024, 2, 29), date(2024, 12, 31)):
            assert day_count_fraction(d, DayCount.ACT_ACT) == Decimal(1) / Decimal(366)

    def test_act_act_non_leap(self):
        for d in (date(2025, 1, 1), date(2025, 12, 31)):
            assert day_count_fraction(d, DayCount.ACT_ACT) == Decimal(1) / Decimal(365)

    def test_year_boundary(self):
        assert day_count_fraction(date(2024, 12, 31), DayCount.ACT_ACT) != day_count_fraction(
            date(2025, 1, 1), DayCount.ACT_ACT
        )

    def test_enum_value_string_accepted(self):
        assert day_count_fraction(date(2025, 1, 1), "ACT_360") == Decimal(1) / Decimal(360)

    def test_unsupported(self):
        with pytest.raises(UnsupportedDayCount):
            day_count_fraction(date(2025, 1, 1), "30_360")


class TestNormalizeDayCount:
    @pytest.mark.parametrize("raw", ["ACT/360", "act360", "Actual/360", "ACT_360", "A/360"])
    def test_act_360_variants(self, raw):
        assert normalize_day_count(raw) is DayCount.ACT_360

    @pytest.mark.parametrize("raw", ["ACT/ACT", "actual/actual", "ACT_ACT", "A/A"])
    def test_act_act_variants(self, raw):
        assert normalize_day_count(raw) is DayCount.ACT_ACT

    def test_enum_passthrough(self):
        assert normalize_day_count(DayCount.ACT_ACT) is DayCount.ACT_ACT

    @pytest.mark.parametrize("raw", ["30/360", "ACT/365", "", None, 360])
    def test_unknown(self, raw):
        with pytest.raises(UnsupportedDayCount):
            normalize_day_count(raw)
