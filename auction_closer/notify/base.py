"""Notifier contract and the closing notice payload."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol

from ..auctions.models import Auction
from ..transport.timestamps import format_timestamp

CLOSING_EVENT = "auction_closed"


class NotificationError(RuntimeError):
    """Raised when a closing notice could not be delivered."""


class Notifier(Protocol):
    def send_closing_notice(self, auction: Auction) -> None: ...


def build_notice(auction: Auction, sent_at: datetime) -> dict[str, Any]:
    return {
        "event": CLOSING_EVENT,
        "auction": auction.to_record(),
        "sent_at": format_timestamp(sent_at),
    }
