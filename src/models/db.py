"""SQLAlchemy ORM models for the rate store."""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Date, DateTime, Numeric, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class BaseRateRecord(Base):
    __tablename__ = "base_rates"

    rate_date: Mapped[date] = mapped_column("date", Date, primary_key=True)
    # Decimal, e.g. 0.0532 = 5.32%
    rate: Mapped[Decimal] = mapped_column(Numeric(10, 6, asdecimal=True))
    source: Mapped[str] = mapped_column(String(50), default="manual")
    imported_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )
