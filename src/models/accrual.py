from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from enum import Enum

DEFAULT_LOOKBACK_DAYS = 5
BPS_PER_UNIT = Decimal("10000")


class DayCount(str, Enum):
    ACT_ACT = "ACT_ACT"
    ACT_360 = "ACT_360"


class RateIndex(str, Enum):
    SOFR_DAILY_SIMPLE = "SOFR_DAILY_SIMPLE"


# Annualized decimal rate per calendar date, e.g. Decimal("0.0525") for 5.25%
RateMap = Mapping[date, Decimal]


@dataclass(frozen=True)
class AccrualRequest:
    principal: Decimal
    spread_bps: Decimal
    start_date: date
    end_date: date
    day_count: DayCount = DayCount.ACT_360
    rate_index: RateIndex = RateIndex.SOFR_DAILY_SIMPLE
    lookback_days: int | None = DEFAULT_LOOKBACK_DAYS  # None = no-lookback variant

    @property
    def spread(self) -> Decimal:
        """Spread as a decimal rate: 250 bps -> 0.025."""
        return Decimal(self.spread_bps) / BPS_PER_UNIT

    @property
    def effective_lookback(self) -> int:
        return self.lookback_days or 0

    @property
    def observation_start(self) -> date:
        """Earliest date the rate map must cover."""
        return self.start_date - timedelta(days=self.effective_lookback)


@dataclass(frozen=True)
class DailyAccrualRecord:
    date: date
    observation_date: date
    base_rate: Decimal
    spread: Decimal
    all_in_rate: Decimal
    day_count_fraction: Decimal
    interest: Decimal
    accrued_to_date: Decimal


@dataclass(frozen=True)
class AccrualResult:
    rate_index: RateIndex
    day_count: DayCount
    principal: Decimal
    spread_bps: Decimal
    start_date: date
    end_date: date
    lookback_days: int | None
    total_interest: Decimal
    total_amount: Decimal
    daily: tuple[DailyAccrualRecord, ...]

    @property
    def days(self) -> int:
        return len(self.daily)
