"""Closing notices published to a Google Pub/Sub topic."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from ..auctions.models import Auction
from ..transport.canonical_json import canonical_dumps
from .base import CLOSING_EVENT, NotificationError, build_notice

try:  # pragma: no cover - optional dependency
    from google.cloud import pubsub_v1
except ImportError:  # pragma: no cover - library missing
    pubsub_v1 = None

logger = logging.getLogger(__name__)


class PubSubNotifier:
    def __init__(
        self,
        *,
        project_id: str,
        topic: str = "auction-closed",
        timeout_seconds: float = 10.0,
        publisher=None,
    ) -> None:
        if not project_id:
            raise ValueError("pubsub notifier requires project_id")
        if publisher is None:
            if pubsub_v1 is None:
                raise RuntimeError("google-cloud-pubsub is required for pubsub notifier")
            publisher = pubsub_v1.PublisherClient()
        self._publisher = publisher
        self._timeout = timeout_seconds
        if topic.startswith("projects/"):
            self._topic_path = topic
        else:
            self._topic_path = publisher.topic_path(project_id, topic)

    def send_closing_notice(self, auction: Auction) -> None:
        message = canonical_dumps(build_notice(auction, datetime.now(timezone.utc)))
        try:
            future = self._publisher.publish(
                self._topic_path,
                message,
                event=CLOSING_EVENT,
                auction_id=auction.auction_id,
            )
            message_id = future.result(timeout=self._timeout)
        except Exception as exc:
            # publish futures surface transport, timeout and API errors alike
            raise NotificationError(f"pubsub publish failed: {exc}") from exc
        logger.debug("auction=%s published as message %s", auction.auction_id, message_id)
