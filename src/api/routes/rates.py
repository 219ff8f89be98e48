"""Base rate routes."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query

from src.api.deps import get_importer, get_rate_store
from src.api.schemas import DailyRateResponse, ImportResponse, RatesResponse
from src.config import settings
from src.data.importer import SofrImporter
from src.data.nyfed import RateFetchError
from src.data.rate_store import RateStore
from src.engine.calendar import each_day_inclusive, parse_calendar_date

router = APIRouter(prefix="/api/v1/rates", tags=["rates"])


@router.get("", response_model=RatesResponse)
def get_rates(
    start: str = Query(..., description="YYYY-MM-DD"),
    end: str = Query(..., description="YYYY-MM-DD"),
    store: RateStore = Depends(get_rate_store),
):
    """Stored daily rates for an inclusive range; null where none is stored."""
    start_date = parse_calendar_date(start)
    end_date = parse_calendar_date(end)
    if len(each_day_inclusive(start_date, end_date)) > settings.max_range_days:
        raise HTTPException(
            status_code=400,
            detail=f"Date range exceeds {settings.max_range_days} days.",
        )
    return RatesResponse(
        start=start_date,
        end=end_date,
        rates=[DailyRateResponse(date=d, rate=r) for d, r in store.get_daily(start_date, end_date)],
    )


@router.post("/import", response_model=ImportResponse)
async def import_rates(importer: SofrImporter = Depends(get_importer)):
    """Pull the latest SOFR fixings from the NY Fed into the store."""
    try:
        summary = await importer.import_latest()
    except RateFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return ImportResponse(**asdict(summary))
