"""SQLAlchemy-backed store of published daily base rates."""

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from pathlib import Path

from sqlalchemy import create_engine, func, select
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from src.engine import rates
from src.engine.calendar import each_day_inclusive
from src.models.db import Base, BaseRateRecord

logger = logging.getLogger(__name__)


def _ensure_sqlite_dir(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


class RateStore:
    def __init__(self, database_url: str, echo: bool = False):
        _ensure_sqlite_dir(database_url)
        self.engine = create_engine(database_url, echo=echo)
        self._session = sessionmaker(self.engine, expire_on_commit=False)

    def init_db(self) -> None:
        Base.metadata.create_all(self.engine)

    def session(self) -> Session:
        return self._session()

    def upsert(self, observations: Iterable[tuple[date, Decimal]], source: str = "manual") -> int:
        """Insert or replace rates by date. Returns rows written."""
        written = 0
        with self.session() as session, session.begin():
            for d, rate in observations:
                session.merge(BaseRateRecord(rate_date=d, rate=rate, source=source))
                written += 1
        logger.debug("Upserted %s base rates from %s", written, source)
        return written

    def count(self) -> int:
        with self.session() as session:
            return session.scalar(select(func.count()).select_from(BaseRateRecord)) or 0

    def max_date(self) -> date | None:
        with self.session() as session:
            return session.scalar(select(func.max(BaseRateRecord.rate_date)))

    def get_rates(self, start: date, end: date) -> list[tuple[date, Decimal]]:
        """Stored observations in [start, end], ascending."""
        stmt = (
            select(BaseRateRecord.rate_date, BaseRateRecord.rate)
            .where(BaseRateRecord.rate_date >= start, BaseRateRecord.rate_date <= end)
            .order_by(BaseRateRecord.rate_date)
        )
        with self.session() as session:
            return [(d, Decimal(rate)) for d, rate in session.execute(stmt)]

    def get_daily(self, start: date, end: date) -> list[tuple[date, Decimal | None]]:
        """One entry per calendar day; None where nothing is stored."""
        stored = dict(self.get_rates(start, end))
        return [(d, stored.get(d)) for d in each_day_inclusive(start, end)]

    def latest_before(self, d: date) -> tuple[date, Decimal] | None:
        stmt = (
            select(BaseRateRecord.rate_date, BaseRateRecord.rate)
            .where(BaseRateRecord.rate_date < d)
            .order_by(BaseRateRecord.rate_date.desc())
            .limit(1)
        )
        with self.session() as session:
            row = session.execute(stmt).first()
        if row is None:
            return None
        found, rate = row
        return found, Decimal(rate)

    def build_rate_map(self, start: date, end: date, carry_forward: bool = True) -> dict[date, Decimal]:
        """Rate map for [start, end] ready for the accrual engine.

        With carry_forward, gaps are filled from the previous published rate
        (seeded from the latest rate stored before ``start``); raises
        NoPriorRate if there is none. Without it, gaps are left for the engine
        to report as MissingBaseRate.
        """
        observations = self.get_rates(start, end)
        if not carry_forward:
            return rates.exact(observations, start, end)
        prior = self.latest_before(start)
        return rates.carry_forward(observations, start, end, prior=prior)
