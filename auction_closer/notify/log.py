"""Notifier that only records closing notices in the application log."""

from __future__ import annotations

import logging

from ..auctions.models import Auction

logger = logging.getLogger(__name__)


class LogNotifier:
    def send_closing_notice(self, auction: Auction) -> None:
        logger.info(
            "[local-notice] auction=%s description=%r closed",
            auction.auction_id,
            auction.description,
        )
