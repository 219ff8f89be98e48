"""Incremental import of published SOFR rates into the rate store.

Strategy: look at the latest stored date, ask the NY Fed for just enough
recent fixings to cover the gap to today (capped at 999), and upsert only
dates newer than what is already stored.
"""

import logging
from dataclasses import dataclass
from datetime import date

from src.data.nyfed import MAX_LAST_N, NYFedClient
from src.data.rate_store import RateStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportSummary:
    today: date
    last_in_db: date | None
    lookback_days_requested: int
    fetched_count: int
    upserted_count: int
    imported_from: date | None = None
    imported_to: date | None = None
    note: str | None = None


class SofrImporter:
    def __init__(self, store: RateStore, client: NYFedClient | None = None):
        self.store = store
        self.client = client or NYFedClient()

    async def import_latest(self, today: date | None = None) -> ImportSummary:
        today = today or date.today()
        last_in_db = self.store.max_date()

        lookback = MAX_LAST_N
        gap_days = 0
        if last_in_db is not None:
            # Calendar days from the day after the last stored date through today
            gap_days = (today - last_in_db).days
            if gap_days <= 0:
                return ImportSummary(
                    today=today,
                    last_in_db=last_in_db,
                    lookback_days_requested=0,
                    fetched_count=0,
                    upserted_count=0,
                    note="No new dates to import.",
                )
            lookback = min(MAX_LAST_N, gap_days)

        fetched = await self.client.get_sofr_last_n(lookback)
        new_only = [
            o for o in fetched
            if last_in_db is None or o.date > last_in_db
        ]
        written = self.store.upsert(((o.date, o.rate) for o in new_only), source="nyfed")

        note = None
        if gap_days > MAX_LAST_N:
            note = (
                f"DB gap exceeds {MAX_LAST_N} calendar days; NY Fed last/{{n}} caps at "
                f"{MAX_LAST_N}. Import may be partial."
            )
            logger.warning("SOFR import may be partial: gap of %s days", gap_days)

        summary = ImportSummary(
            today=today,
            last_in_db=last_in_db,
            lookback_days_requested=lookback,
            fetched_count=len(fetched),
            upserted_count=written,
            imported_from=new_only[0].date if new_only else None,
            imported_to=new_only[-1].date if new_only else None,
            note=note,
        )
        logger.info(
            "SOFR import: fetched %s, upserted %s (%s..%s)",
            summary.fetched_count, summary.upserted_count,
            summary.imported_from, summary.imported_to,
        )
        return summary
