"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.deps import get_rate_store
from src.api.routes import accrual, rates
from src.config import settings
from src.data.seed import seed_demo_rates
from src.engine.errors import AccrualError, MissingBaseRate, NoPriorRate

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = get_rate_store()
    store.init_db()
    if settings.seed_demo_rates:
        seed_demo_rates(store)
    yield


app = FastAPI(
    title="SOFR Accrual",
    description="Daily simple SOFR interest accrual",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(accrual.router)
app.include_router(rates.router)


@app.exception_handler(AccrualError)
async def accrual_error_handler(request: Request, exc: AccrualError):
    # Rate gaps are data problems the caller can fix by importing rates
    status = 422 if isinstance(exc, (MissingBaseRate, NoPriorRate)) else 400
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status, content={"kind": exc.kind, "message": exc.message})


@app.get("/health")
async def health():
    return {"status": "ok"}
