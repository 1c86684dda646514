"""Shared fixtures for the auction closer tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from auction_closer.auctions.clock import FixedClock
from auction_closer.auctions.models import Auction

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)
LONG_AGO = datetime(1999, 2, 20, tzinfo=timezone.utc)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def collaborators() -> MagicMock:
    """Parent mock so repository and notifier calls share one ordered call log."""
    parent = MagicMock()
    parent.repository.list_current.return_value = []
    return parent


def make_auction(description: str, *, days_ago: float | None = None, start: datetime | None = None) -> Auction:
    if start is None:
        start = NOW - timedelta(days=days_ago or 0)
    return Auction(description=description, start_date=start)
