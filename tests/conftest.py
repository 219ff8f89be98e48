"""Canonical test fixtures used across engine, data and API tests.

Fixture loan: $1,000,000 principal, 250 bps over SOFR, ACT/360.
Rates: flat 5% from 2025-12-01 through 2026-02-28 unless a test builds its own.
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from src.data.rate_store import RateStore
from src.models.accrual import AccrualRequest, DayCount, RateIndex


def flat_rates(start: date, end: date, rate: Decimal = Decimal("0.05")) -> dict[date, Decimal]:
    days = (end - start).days + 1
    return {start + timedelta(days=i): rate for i in range(days)}


@pytest.fixture
def flat_rate_map() -> dict[date, Decimal]:
    """Flat 5% for every calendar day around January 2026."""
    return flat_rates(date(2025, 12, 1), date(2026, 2, 28))


@pytest.fixture
def canonical_request() -> AccrualRequest:
    """Ten-day January 2026 accrual with no lookback."""
    return AccrualRequest(
        principal=Decimal("1000000"),
        spread_bps=Decimal("250"),
        start_date=date(2026, 1, 1),
        end_date=date(2026, 1, 10),
        day_count=DayCount.ACT_360,
        rate_index=RateIndex.SOFR_DAILY_SIMPLE,
        lookback_days=0,
    )


@pytest.fixture
def store(tmp_path) -> RateStore:
    s = RateStore(f"sqlite:///{tmp_path / 'rates.db'}")
    s.init_db()
    return s
