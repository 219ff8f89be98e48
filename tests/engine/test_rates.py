from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from src.engine.accrual import compute_accrual
from src.engine.errors import MissingBaseRate, NoPriorRate
from src.engine.rates import carry_forward, exact, observation_window

# Fri 2026-01-02, then Mon 2026-01-05 (weekend gap)
PUBLISHED = [
    (date(2026, 1, 2), Decimal("0.0525")),
    (date(2026, 1, 5), Decimal("0.0530")),
    (date(2026, 1, 6), Decimal("0.0531")),
]


class TestObservationWindow:
    def test_with_lookback(self, canonical_request):
        req = replace(canonical_request, start_date=date(2026, 1, 6), lookback_days=5)
        assert observation_window(req) == (date(2026, 1, 1), date(2026, 1, 10))

    def test_without_lookback(self, canonical_request):
        req = replace(canonical_request, lookback_days=None)
        assert observation_window(req) == (date(2026, 1, 1), date(2026, 1, 10))


class TestExact:
    def test_keeps_gaps(self):
        rates = exact(PUBLISHED, date(2026, 1, 2), date(2026, 1, 6))
        assert date(2026, 1, 3) not in rates
        assert len(rates) == 3

    def test_clips_to_window(self):
        rates = exact(PUBLISHED, date(2026, 1, 5), date(2026, 1, 5))
        assert rates == {date(2026, 1, 5): Decimal("0.0530")}


class TestCarryForward:
    def test_weekend_reuses_friday(self):
        rates = carry_forward(PUBLISHED, date(2026, 1, 2), date(2026, 1, 6))
        assert rates[date(2026, 1, 3)] == Decimal("0.0525")
        assert rates[date(2026, 1, 4)] == Decimal("0.0525")
        assert rates[date(2026, 1, 5)] == Decimal("0.0530")
        assert len(rates) == 5

    def test_fills_past_last_observation(self):
        rates = carry_forward(PUBLISHED, date(2026, 1, 2), date(2026, 1, 9))
        assert rates[date(2026, 1, 9)] == Decimal("0.0531")

    def test_seeded_from_prior(self):
        prior = (date(2025, 12, 31), Decimal("0.0520"))
        rates = carry_forward(PUBLISHED, date(2026, 1, 1), date(2026, 1, 3), prior=prior)
        assert rates[date(2026, 1, 1)] == Decimal("0.0520")
        assert rates[date(2026, 1, 2)] == Decimal("0.0525")

    def test_no_prior_rate_fails(self):
        with pytest.raises(NoPriorRate) as exc:
            carry_forward(PUBLISHED, date(2026, 1, 1), date(2026, 1, 3))
        assert exc.value.date == date(2026, 1, 1)

    def test_prior_must_precede_window(self):
        with pytest.raises(ValueError):
            carry_forward(PUBLISHED, date(2026, 1, 2), date(2026, 1, 3), prior=(date(2026, 1, 2), Decimal("0.05")))

    def test_filled_map_feeds_engine(self, canonical_request):
        req = replace(canonical_request, start_date=date(2026, 1, 2), end_date=date(2026, 1, 6))
        result = compute_accrual(req, carry_forward(PUBLISHED, *observation_window(req)))
        assert [r.base_rate for r in result.daily] == [
            Decimal("0.0525"), Decimal("0.0525"), Decimal("0.0525"),
            Decimal("0.0530"), Decimal("0.0531"),
        ]

    def test_sparse_map_fails_in_engine(self, canonical_request):
        req = replace(canonical_request, start_date=date(2026, 1, 2), end_date=date(2026, 1, 6))
        with pytest.raises(MissingBaseRate) as exc:
            compute_accrual(req, exact(PUBLISHED, *observation_window(req)))
        assert exc.value.date == date(2026, 1, 3)
