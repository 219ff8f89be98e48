"""Building the date -> rate map the accrual engine reads.

Pure functions: observations in, dict out. The rate store wraps these with
database lookups; tests and the CLI can call them directly.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.engine.calendar import each_day_inclusive
from src.engine.errors import NoPriorRate
from src.models.accrual import AccrualRequest

Observation = tuple[date, Decimal]


def observation_window(request: AccrualRequest) -> tuple[date, date]:
    """Inclusive range of observation dates a request will look up."""
    return request.observation_start, request.end_date


def exact(observations: Iterable[Observation], start: date, end: date) -> dict[date, Decimal]:
    """Published rates inside [start, end] only. Gaps stay gaps."""
    return {d: rate for d, rate in observations if start <= d <= end}


def carry_forward(
    observations: Iterable[Observation],
    start: date,
    end: date,
    prior: Observation | None = None,
) -> dict[date, Decimal]:
    """Dense map for every day in [start, end].

    Days with no published rate (weekends, holidays) reuse the most recent
    earlier rate. ``prior`` is the latest stored observation before ``start``
    and seeds the window when ``start`` itself has no rate.

    Raises NoPriorRate when nothing is published on or before ``start``.
    """
    published = exact(observations, start, end)
    if prior is not None and prior[0] >= start:
        raise ValueError(f"prior observation {prior[0]} must precede window start {start}")

    last = prior[1] if prior is not None else None
    if start not in published and last is None:
        raise NoPriorRate(start)

    filled: dict[date, Decimal] = {}
    for d in each_day_inclusive(start, end):
        if d in published:
            last = published[d]
        filled[d] = last
    return filled
