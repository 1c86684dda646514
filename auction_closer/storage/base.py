"""Repository contract consumed by the closing pass."""

from __future__ import annotations

from typing import Protocol

from ..auctions.models import Auction


class RepositoryError(RuntimeError):
    """Raised when the auction store cannot be read or written."""


class AuctionRepository(Protocol):
    def list_current(self) -> list[Auction]:
        """Return the auctions that are not closed yet."""
        ...

    def persist_update(self, auction: Auction) -> None:
        """Durably record the auction's current state. Raises RepositoryError."""
        ...
