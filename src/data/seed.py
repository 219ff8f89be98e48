"""Demo base rates for local development.

Seeding is an explicit step (CLI ``seed`` or ``SEED_DEMO_RATES=true`` at API
startup); nothing here runs on import.
"""

import logging
from datetime import date
from decimal import Decimal

from src.data.rate_store import RateStore

logger = logging.getLogger(__name__)

DEMO_RATES: list[tuple[date, Decimal]] = [
    (date(2026, 1, 1), Decimal("0.0525")),
    (date(2026, 1, 2), Decimal("0.0525")),
    (date(2026, 1, 3), Decimal("0.0526")),
    (date(2026, 1, 4), Decimal("0.0526")),
    (date(2026, 1, 5), Decimal("0.0527")),
    (date(2026, 1, 6), Decimal("0.0527")),
    (date(2026, 1, 7), Decimal("0.0528")),
    (date(2026, 1, 8), Decimal("0.0528")),
    (date(2026, 1, 9), Decimal("0.0529")),
    (date(2026, 1, 10), Decimal("0.0529")),
]


def seed_demo_rates(store: RateStore) -> int:
    """Insert demo rates if the store is empty. Returns rows written."""
    if store.count() > 0:
        return 0
    written = store.upsert(DEMO_RATES, source="demo")
    logger.info("Seeded %s demo base rates", written)
    return written
