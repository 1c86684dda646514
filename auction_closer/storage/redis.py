"""Redis storage backend using the redis-py client."""

from __future__ import annotations

import logging
from typing import Any

import orjson
import redis
from jsonschema import ValidationError

from ..auctions.models import Auction
from ..transport.canonical_json import canonical_dumps
from ..transport.timestamps import TimestampError
from .base import RepositoryError

logger = logging.getLogger(__name__)


class RedisAuctionRepository:
    def __init__(self, *, url: str, prefix: str = "closer") -> None:
        if not url:
            raise ValueError("redis url missing")
        self._redis = redis.Redis.from_url(url)
        self._prefix = prefix.rstrip(":")

    def _auction_key(self, auction_id: str) -> str:
        return f"{self._prefix}:auction:{auction_id}"

    def _decode(self, raw: bytes) -> Auction:
        try:
            return Auction.from_record(orjson.loads(raw))
        except (orjson.JSONDecodeError, ValidationError, TimestampError) as exc:
            raise RepositoryError(f"malformed auction record: {exc}") from exc

    def add(self, auction: Auction) -> Auction:
        try:
            self._redis.set(self._auction_key(auction.auction_id), canonical_dumps(auction.to_record()))
        except redis.RedisError as exc:
            raise RepositoryError(f"redis write failed: {exc}") from exc
        return auction

    def get(self, auction_id: str) -> Auction:
        try:
            raw = self._redis.get(self._auction_key(auction_id))
        except redis.RedisError as exc:
            raise RepositoryError(f"redis read failed: {exc}") from exc
        if raw is None:
            raise KeyError(auction_id)
        return self._decode(raw)

    def list_current(self) -> list[Auction]:
        pattern = self._auction_key("*")
        keys: list[Any] = []
        try:
            cursor = 0
            while True:
                cursor, batch = self._redis.scan(cursor=cursor, match=pattern, count=100)
                keys.extend(batch)
                if cursor == 0:
                    break
            values = self._redis.mget(keys) if keys else []
        except redis.RedisError as exc:
            raise RepositoryError(f"redis scan failed: {exc}") from exc
        auctions = []
        for key, value in zip(keys, values):
            if not value:
                continue
            try:
                auctions.append(self._decode(value))
            except RepositoryError as exc:
                logger.warning("skipping undecodable auction record %r: %s", key, exc)
        current = [auction for auction in auctions if not auction.closed]
        return sorted(current, key=lambda auction: (auction.start_date, auction.auction_id))

    def persist_update(self, auction: Auction) -> None:
        key = self._auction_key(auction.auction_id)
        try:
            # xx: only overwrite records that already exist
            stored = self._redis.set(key, canonical_dumps(auction.to_record()), xx=True)
        except redis.RedisError as exc:
            raise RepositoryError(f"redis write failed: {exc}") from exc
        if not stored:
            raise RepositoryError(f"auction {auction.auction_id} not found")
