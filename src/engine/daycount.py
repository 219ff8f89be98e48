"""Single-day accrual weights by day-count convention."""

from datetime import date
from decimal import Decimal

from src.engine.errors import UnsupportedDayCount
from src.models.accrual import DayCount

ONE = Decimal("1")

# Typical spellings of each convention -> canonical enum
DAY_COUNT_ALIASES = {
    "ACT_360": DayCount.ACT_360,
    "ACT/360": DayCount.ACT_360,
    "ACT360": DayCount.ACT_360,
    "A/360": DayCount.ACT_360,
    "ACTUAL/360": DayCount.ACT_360,
    "ACT_ACT": DayCount.ACT_ACT,
    "ACT/ACT": DayCount.ACT_ACT,
    "ACTACT": DayCount.ACT_ACT,
    "A/A": DayCount.ACT_ACT,
    "ACTUAL/ACTUAL": DayCount.ACT_ACT,
}


def _supported() -> list[str]:
    return [dc.value for dc in DayCount]


def normalize_day_count(value: DayCount | str) -> DayCount:
    if isinstance(value, DayCount):
        return value
    if not isinstance(value, str):
        raise UnsupportedDayCount(value, _supported())
    key = value.strip().upper().replace(" ", "").replace("-", "/")
    try:
        return DAY_COUNT_ALIASES[key]
    except KeyError:
        raise UnsupportedDayCount(value, _supported()) from None


def is_leap_year(year: int) -> bool:
    # Divisible by 4, except centuries not divisible by 400
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(d: date) -> int:
    return 366 if is_leap_year(d.year) else 365


def day_count_fraction(d: date, convention: DayCount | str) -> Decimal:
    """Fraction of a year that one accrual day on ``d`` represents.

    ACT/360 is fixed at 1/360 regardless of date. ACT/ACT uses the actual
    length of ``d``'s calendar year.
    """
    if convention == DayCount.ACT_360:
        return ONE / Decimal(360)
    if convention == DayCount.ACT_ACT:
        return ONE / Decimal(days_in_year(d))
    raise UnsupportedDayCount(convention, _supported())
