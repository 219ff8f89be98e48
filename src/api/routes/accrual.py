"""Accrual routes — the primary API entry point."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_rate_store
from src.api.schemas import AccrualRequestBody, AccrualResponse, DailyAccrualResponse
from src.config import settings
from src.data.rate_store import RateStore
from src.engine.accrual import compute_accrual, validate_request
from src.engine.calendar import parse_calendar_date
from src.engine.rates import observation_window
from src.models.accrual import AccrualRequest, AccrualResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["accrual"])


def _build_request(body: AccrualRequestBody) -> AccrualRequest:
    """Parse the HTTP body into a validated engine request."""
    return validate_request(AccrualRequest(
        principal=body.principal,
        spread_bps=body.spread_bps,
        start_date=parse_calendar_date(body.start_date),
        end_date=parse_calendar_date(body.end_date),
        day_count=body.day_count,
        rate_index=body.rate_index,
        lookback_days=body.lookback_days,
    ))


def _result_to_response(result: AccrualResult) -> AccrualResponse:
    return AccrualResponse(
        rate_index=result.rate_index.value,
        day_count=result.day_count.value,
        principal=result.principal,
        spread_bps=result.spread_bps,
        start_date=result.start_date,
        end_date=result.end_date,
        lookback_days=result.lookback_days,
        total_interest=result.total_interest,
        total_amount=result.total_amount,
        days=result.days,
        daily=[
            DailyAccrualResponse(
                date=r.date,
                observation_date=r.observation_date,
                base_rate=r.base_rate,
                spread=r.spread,
                all_in_rate=r.all_in_rate,
                day_count_fraction=r.day_count_fraction,
                interest=r.interest,
                accrued_to_date=r.accrued_to_date,
            )
            for r in result.daily
        ],
    )


@router.post("/accrual", response_model=AccrualResponse)
def calculate_accrual(
    body: AccrualRequestBody,
    store: RateStore = Depends(get_rate_store),
):
    """Daily accrual schedule for a loan over an inclusive date range.

    Orchestrates: validate request → build rate map for the observation
    window → run the accrual engine → return summary plus daily ledger.
    AccrualError subclasses are mapped to 400/422 by the app's handler.
    """
    request = _build_request(body)
    if (request.end_date - request.start_date).days + 1 > settings.max_range_days:
        raise HTTPException(
            status_code=400,
            detail=f"Date range exceeds {settings.max_range_days} days.",
        )

    carry_forward = settings.carry_forward_rates if body.carry_forward is None else body.carry_forward
    start, end = observation_window(request)
    rate_map = store.build_rate_map(start, end, carry_forward=carry_forward)

    result = compute_accrual(request, rate_map)
    logger.info(
        "Accrual %s..%s %s: total interest %s",
        result.start_date, result.end_date, result.day_count.value, result.total_interest,
    )
    return _result_to_response(result)
