"""Inspect open auctions and trigger a closing pass."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request

from ..auctions.closer import AuctionCloser
from ..storage import AuctionRepository, RepositoryError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_repository(request: Request) -> AuctionRepository:
    return request.app.state.repository


def _get_closer(request: Request) -> AuctionCloser:
    return request.app.state.closer


@router.get("/auctions")
def current_auctions(
    repository: AuctionRepository = Depends(_get_repository),
) -> list[dict[str, Any]]:
    try:
        auctions = repository.list_current()
    except RepositoryError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return [auction.to_record() for auction in auctions]


@router.post("/closing-pass")
def closing_pass(closer: AuctionCloser = Depends(_get_closer)) -> dict[str, int]:
    try:
        result = closer.run()
    except RepositoryError as exc:
        logger.error("closing pass aborted: %s", exc)
        raise HTTPException(status_code=503, detail=f"auction store unavailable: {exc}") from exc
    return {"total_closed": result.total_closed}
