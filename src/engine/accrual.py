"""Daily simple SOFR accrual engine.

Pure functions: Decimal in, dataclass out. No I/O. The caller supplies a
date -> rate map covering the observation window; every accrual day must
resolve a rate or the whole calculation fails.
"""

import logging
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from src.engine.calendar import each_day_inclusive, parse_calendar_date, shift_date
from src.engine.daycount import day_count_fraction, normalize_day_count
from src.engine.errors import (
    InvalidDateFormat,
    InvalidLookback,
    InvalidPrincipal,
    InvalidSpread,
    MissingBaseRate,
    RangeOrderError,
    UnsupportedDayCount,
    UnsupportedRateIndex,
)
from src.models.accrual import (
    AccrualRequest,
    AccrualResult,
    DailyAccrualRecord,
    DayCount,
    RateIndex,
    RateMap,
)

logger = logging.getLogger(__name__)

MAX_LOOKBACK_DAYS = 99

# Every (rate index, day count) pair the engine will price
SUPPORTED_COMBINATIONS: dict[RateIndex, frozenset[DayCount]] = {
    RateIndex.SOFR_DAILY_SIMPLE: frozenset({DayCount.ACT_ACT, DayCount.ACT_360}),
}


def _to_decimal(value: object) -> Decimal | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float, str)):
        try:
            return Decimal(str(value).strip())
        except InvalidOperation:
            return None
    return None


def _to_date(value: object) -> date:
    """Accept a date, a datetime (time part dropped) or a strict ISO string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_calendar_date(value)
    raise InvalidDateFormat(value)


def _rate_index(value: RateIndex | str) -> RateIndex:
    supported = [ri.value for ri in SUPPORTED_COMBINATIONS]
    try:
        index = RateIndex(value)
    except ValueError:
        raise UnsupportedRateIndex(value, supported) from None
    if index not in SUPPORTED_COMBINATIONS:
        raise UnsupportedRateIndex(value, supported)
    return index


def validate_request(request: AccrualRequest) -> AccrualRequest:
    """Re-check a request and return it with normalized types.

    Numbers become Decimal, dates become plain dates and enum-like strings
    become enums, so the calculation loop never re-parses anything.
    """
    principal = _to_decimal(request.principal)
    if principal is None or not principal.is_finite() or principal <= 0:
        raise InvalidPrincipal(request.principal)

    spread_bps = _to_decimal(request.spread_bps)
    if spread_bps is None or not spread_bps.is_finite() or spread_bps < 0:
        raise InvalidSpread(request.spread_bps)

    rate_index = _rate_index(request.rate_index)
    day_count = normalize_day_count(request.day_count)
    allowed = SUPPORTED_COMBINATIONS[rate_index]
    if day_count not in allowed:
        raise UnsupportedDayCount(day_count.value, sorted(dc.value for dc in allowed))

    lookback = request.lookback_days
    if lookback is not None:
        if isinstance(lookback, bool) or not isinstance(lookback, int):
            raise InvalidLookback(lookback, MAX_LOOKBACK_DAYS)
        if not 0 <= lookback <= MAX_LOOKBACK_DAYS:
            raise InvalidLookback(lookback, MAX_LOOKBACK_DAYS)

    start_date = _to_date(request.start_date)
    end_date = _to_date(request.end_date)
    if end_date < start_date:
        raise RangeOrderError(start_date, end_date)

    return replace(
        request,
        principal=principal,
        spread_bps=spread_bps,
        rate_index=rate_index,
        day_count=day_count,
        start_date=start_date,
        end_date=end_date,
    )


def observation_date(accrual_date: date, lookback_days: int) -> date:
    if lookback_days == 0:
        return accrual_date
    return shift_date(accrual_date, -lookback_days)


def compute_accrual(request: AccrualRequest, rate_map: RateMap) -> AccrualResult:
    """Accrue simple daily interest over [start_date, end_date] inclusive.

    For each accrual day D the base rate is read at D - lookback_days; the
    spread is added and the all-in rate is weighted by that day's day-count
    fraction. ``accrued_to_date`` on each record is the running total.

    Raises an AccrualError subclass on invalid input or a missing rate; no
    partial result is ever returned.
    """
    req = validate_request(request)
    spread = req.spread
    lookback = req.effective_lookback

    accrued = Decimal("0")
    daily: list[DailyAccrualRecord] = []

    for d in each_day_inclusive(req.start_date, req.end_date):
        obs = observation_date(d, lookback)
        base_rate = _to_decimal(rate_map.get(obs))
        if base_rate is None or not base_rate.is_finite():
            raise MissingBaseRate(obs)

        all_in_rate = base_rate + spread
        fraction = day_count_fraction(d, req.day_count)
        interest = req.principal * all_in_rate * fraction
        accrued += interest

        daily.append(DailyAccrualRecord(
            date=d,
            observation_date=obs,
            base_rate=base_rate,
            spread=spread,
            all_in_rate=all_in_rate,
            day_count_fraction=fraction,
            interest=interest,
            accrued_to_date=accrued,
        ))

    logger.debug(
        "Accrued %s days %s..%s (%s, lookback %s): %s",
        len(daily), req.start_date, req.end_date, req.day_count.value, lookback, accrued,
    )

    return AccrualResult(
        rate_index=req.rate_index,
        day_count=req.day_count,
        principal=req.principal,
        spread_bps=req.spread_bps,
        start_date=req.start_date,
        end_date=req.end_date,
        lookback_days=req.lookback_days,
        total_interest=accrued,
        total_amount=req.principal + accrued,
        daily=tuple(daily),
    )
