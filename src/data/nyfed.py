"""NY Fed markets API client for published SOFR fixings."""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation

import httpx

from src.config import settings

logger = logging.getLogger(__name__)

# last/{n} endpoint refuses anything above this
MAX_LAST_N = 999


class RateFetchError(RuntimeError):
    pass


@dataclass(frozen=True)
class SofrObservation:
    date: date
    rate: Decimal  # Decimal, not percent: 3.64% -> 0.0364


def parse_ref_rates(data: dict) -> list[SofrObservation]:
    """Extract SOFR rows from a refRates payload, ascending by date."""
    rows: list[SofrObservation] = []
    for r in data.get("refRates") or []:
        if r.get("type") != "SOFR" or not r.get("effectiveDate") or r.get("percentRate") is None:
            continue
        try:
            rows.append(SofrObservation(
                date=date.fromisoformat(r["effectiveDate"]),
                rate=Decimal(str(r["percentRate"])) / 100,
            ))
        except (ValueError, InvalidOperation):
            logger.warning("Skipping malformed SOFR row: %s", r)
    rows.sort(key=lambda o: o.date)
    return rows


class NYFedClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.nyfed_base_url).rstrip("/")
        self.timeout = timeout or settings.nyfed_timeout_seconds
        self._transport = transport

    async def get_sofr_last_n(self, n: int) -> list[SofrObservation]:
        """Fetch the last ``n`` published SOFR fixings (n clamped to 1..999)."""
        n = max(1, min(MAX_LAST_N, n))
        url = f"{self.base_url}/rates/secured/sofr/last/{n}.json"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(url)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning("NY Fed request failed (%s): %s", e.response.status_code, e)
            raise RateFetchError(
                f"NY Fed request failed ({e.response.status_code}). {e.response.text}".strip()
            ) from e
        except httpx.HTTPError as e:
            logger.warning("NY Fed request error: %s", e)
            raise RateFetchError(f"NY Fed request error: {e}") from e
        except ValueError as e:
            logger.warning("NY Fed returned a non-JSON body: %s", e)
            raise RateFetchError("NY Fed returned a non-JSON body") from e

        return parse_ref_rates(data)
