"""CLI for the SOFR rate store and accrual engine.

Usage:
    python -m src.data.rates_cli import
    python -m src.data.rates_cli seed
    python -m src.data.rates_cli show 2026-01-01 2026-01-10
    python -m src.data.rates_cli accrue 1000000 250 2026-01-06 2026-01-10 --day-count ACT_360 --lookback 5
"""

import argparse
import asyncio
import logging
import sys
from decimal import Decimal

from src.config import settings
from src.data.importer import SofrImporter
from src.data.nyfed import RateFetchError
from src.data.rate_store import RateStore
from src.data.seed import seed_demo_rates
from src.engine.accrual import compute_accrual, validate_request
from src.engine.calendar import parse_calendar_date
from src.engine.errors import AccrualError
from src.engine.rates import observation_window
from src.models.accrual import AccrualRequest


def print_rates(rows) -> None:
    print(f"\n{'=' * 40}")
    print("  Daily Base Rates")
    print(f"{'=' * 40}")
    for d, rate in rows:
        value = f"{rate * 100:.4f}%" if rate is not None else "—"
        print(f"  {d.isoformat()}  {value:>10}")
    print()


def print_result(result) -> None:
    print(f"\n{'=' * 72}")
    print(f"  {result.rate_index.value} / {result.day_count.value}  "
          f"{result.start_date} → {result.end_date}  (lookback {result.lookback_days})")
    print(f"{'=' * 72}")
    for r in result.daily:
        print(f"  {r.date}  obs {r.observation_date}  all-in {r.all_in_rate * 100:.4f}%  "
              f"interest {r.interest:>12,.2f}  accrued {r.accrued_to_date:>14,.2f}")
    print()
    print(f"  Principal:        {result.principal:,.2f}")
    print(f"  Total interest:   {result.total_interest:,.2f}")
    print(f"  Total amount:     {result.total_amount:,.2f}")
    print()


async def main() -> None:
    parser = argparse.ArgumentParser(description="SOFR rate store and accrual CLI")
    parser.add_argument("--db", default=settings.database_url, help="SQLAlchemy database URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("import", help="Import latest SOFR fixings from the NY Fed")
    sub.add_parser("seed", help="Seed demo rates into an empty store")

    show = sub.add_parser("show", help="List stored rates for a date range")
    show.add_argument("start")
    show.add_argument("end")

    accrue = sub.add_parser("accrue", help="Compute daily accrual from stored rates")
    accrue.add_argument("principal", type=Decimal)
    accrue.add_argument("spread_bps", type=Decimal)
    accrue.add_argument("start")
    accrue.add_argument("end")
    accrue.add_argument("--day-count", default=settings.default_day_count)
    accrue.add_argument("--rate-index", default=settings.default_rate_index)
    accrue.add_argument("--lookback", type=int, default=settings.default_lookback_days)
    accrue.add_argument("--no-carry-forward", action="store_true", help="Fail on any rate gap")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level)

    store = RateStore(args.db)
    store.init_db()

    try:
        if args.command == "import":
            summary = await SofrImporter(store).import_latest()
            print(f"Fetched {summary.fetched_count}, upserted {summary.upserted_count} "
                  f"({summary.imported_from} → {summary.imported_to})")
            if summary.note:
                print(f"Note: {summary.note}")
        elif args.command == "seed":
            print(f"Seeded {seed_demo_rates(store)} demo rates")
        elif args.command == "show":
            start, end = parse_calendar_date(args.start), parse_calendar_date(args.end)
            print_rates(store.get_daily(start, end))
        elif args.command == "accrue":
            request = validate_request(AccrualRequest(
                principal=args.principal,
                spread_bps=args.spread_bps,
                start_date=parse_calendar_date(args.start),
                end_date=parse_calendar_date(args.end),
                day_count=args.day_count,
                rate_index=args.rate_index,
                lookback_days=args.lookback,
            ))
            rate_map = store.build_rate_map(
                *observation_window(request), carry_forward=not args.no_carry_forward
            )
            print_result(compute_accrual(request, rate_map))
    except (AccrualError, RateFetchError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
