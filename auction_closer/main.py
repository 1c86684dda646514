from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import Depends, FastAPI, Request

from . import __version__
from .admin import auctions as admin_auctions
from .admin import health as admin_health
from .auctions.closer import AuctionCloser
from .config import CloserConfig, get_closer_config
from .notify import build_notifier
from .storage import build_repository


@asynccontextmanager
async def lifespan(app: FastAPI):
    closer_config = get_closer_config()
    repository = build_repository(closer_config)
    notifier = build_notifier(closer_config)
    closer = AuctionCloser(
        repository,
        notifier,
        threshold_days=closer_config.closing.threshold_days,
    )

    app.state.closer_config = closer_config
    app.state.repository = repository
    app.state.notifier = notifier
    app.state.closer = closer
    app.state.start_time = datetime.now(timezone.utc)

    yield

    close = getattr(notifier, "close", None)
    if close is not None:
        close()


app = FastAPI(
    title="Auction Closer",
    version=__version__,
    docs_url="/docs",
    lifespan=lifespan,
)

app.include_router(admin_health.router)
app.include_router(admin_auctions.router)


def get_closer_settings(request: Request) -> CloserConfig:
    return request.app.state.closer_config


@app.get("/", tags=["meta"])
async def root(settings: CloserConfig = Depends(get_closer_settings)) -> dict[str, Any]:
    return {
        "service": "auction-closer",
        "version": app.version,
        "closing": {"threshold_days": settings.closing.threshold_days},
        "storage_backend": settings.storage.backend,
        "notifier_backend": settings.notifier.backend,
    }
