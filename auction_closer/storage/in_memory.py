"""In-memory storage backend for auction records."""

from __future__ import annotations

import threading
from copy import deepcopy
from typing import Any

from ..auctions.models import Auction
from .base import RepositoryError


class InMemoryAuctionRepository:
    def __init__(self) -> None:
        self._records: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def add(self, auction: Auction) -> Auction:
        with self._lock:
            self._records[auction.auction_id] = auction.to_record()
        return auction

    def get(self, auction_id: str) -> Auction:
        with self._lock:
            try:
                record = deepcopy(self._records[auction_id])
            except KeyError as exc:
                raise KeyError(f"auction {auction_id} not found") from exc
        return Auction.from_record(record)

    def list_current(self) -> list[Auction]:
        with self._lock:
            records = [deepcopy(record) for record in self._records.values()]
        return [Auction.from_record(record) for record in records if not record["closed"]]

    def persist_update(self, auction: Auction) -> None:
        with self._lock:
            if auction.auction_id not in self._records:
                raise RepositoryError(f"auction {auction.auction_id} not found")
            self._records[auction.auction_id].update(auction.to_record())
