"""FastAPI dependency injection."""

from functools import lru_cache

from fastapi import Depends

from src.config import settings
from src.data.importer import SofrImporter
from src.data.nyfed import NYFedClient
from src.data.rate_store import RateStore


@lru_cache
def get_rate_store() -> RateStore:
    return RateStore(settings.database_url, echo=settings.debug)


def get_nyfed_client() -> NYFedClient:
    return NYFedClient()


def get_importer(
    store: RateStore = Depends(get_rate_store),
    client: NYFedClient = Depends(get_nyfed_client),
) -> SofrImporter:
    return SofrImporter(store, client)
