"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.config import settings


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys (startDate, spreadBps, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Request schemas ----

class AccrualRequestBody(CamelModel):
    principal: Decimal = Field(..., description="Loan principal, must be > 0")
    spread_bps: Decimal = Field(Decimal("0"), description="Spread over the base rate in bps")
    # Kept as strings so dates go through the strict YYYY-MM-DD parser
    start_date: str = Field(..., description="First accrual date, YYYY-MM-DD")
    end_date: str = Field(..., description="Last accrual date (inclusive), YYYY-MM-DD")
    day_count: str = Field(default_factory=lambda: settings.default_day_count)
    rate_index: str = Field(default_factory=lambda: settings.default_rate_index)
    lookback_days: int | None = Field(
        default_factory=lambda: settings.default_lookback_days,
        description="Rate observation shift in calendar days; null disables lookback",
    )
    carry_forward: bool | None = Field(
        None, description="Fill weekend/holiday gaps from the prior rate (server default if null)"
    )


# ---- Response schemas ----

class DailyAccrualResponse(CamelModel):
    date: date
    observation_date: date
    base_rate: Decimal
    spread: Decimal
    all_in_rate: Decimal
    day_count_fraction: Decimal
    interest: Decimal
    accrued_to_date: Decimal


class AccrualResponse(CamelModel):
    rate_index: str
    day_count: str
    principal: Decimal
    spread_bps: Decimal
    start_date: date
    end_date: date
    lookback_days: int | None = None
    total_interest: Decimal
    total_amount: Decimal
    days: int
    daily: list[DailyAccrualResponse]


class DailyRateResponse(CamelModel):
    date: date
    rate: Decimal | None = None


class RatesResponse(CamelModel):
    start: date
    end: date
    rates: list[DailyRateResponse]


class ImportResponse(CamelModel):
    ok: bool = True
    today: date
    last_in_db: date | None = None
    lookback_days_requested: int
    fetched_count: int
    upserted_count: int
    imported_from: date | None = None
    imported_to: date | None = None
    note: str | None = None


class ErrorResponse(BaseModel):
    kind: str
    message: str
