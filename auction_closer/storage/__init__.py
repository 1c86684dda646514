"""Storage backend factory."""

from __future__ import annotations

from ..config import CloserConfig
from .base import AuctionRepository, RepositoryError
from .firestore import FirestoreAuctionRepository
from .in_memory import InMemoryAuctionRepository
from .redis import RedisAuctionRepository

__all__ = [
    "AuctionRepository",
    "FirestoreAuctionRepository",
    "InMemoryAuctionRepository",
    "RedisAuctionRepository",
    "RepositoryError",
    "build_repository",
]


def build_repository(config: CloserConfig) -> AuctionRepository:
    backend = config.storage.backend
    options = dict(config.storage.options)
    if backend == "in_memory":
        return InMemoryAuctionRepository()
    if backend == "redis":
        return RedisAuctionRepository(**options)
    if backend == "firestore":
        return FirestoreAuctionRepository(**options)
    raise ValueError(f"unknown storage backend {backend}")
