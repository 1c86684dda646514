"""HTTP webhook delivery of closing notices."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import httpx

from ..auctions.models import Auction
from ..transport.canonical_json import canonical_dumps
from ..transport.signatures import sign_payload
from .base import NotificationError, build_notice

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Closer-Signature"


class WebhookNotifier:
    def __init__(
        self,
        *,
        url: str,
        timeout_ms: int = 2000,
        private_key_pem: str | None = None,
        headers: dict[str, str] | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        if not url:
            raise ValueError("webhook url missing")
        self._url = url
        self._private_key_pem = private_key_pem
        self._headers = dict(headers or {})
        self._client = client or httpx.Client(timeout=timeout_ms / 1000)

    def close(self) -> None:
        self._client.close()

    def send_closing_notice(self, auction: Auction) -> None:
        notice = build_notice(auction, datetime.now(timezone.utc))
        headers = {"Content-Type": "application/json", **self._headers}
        if self._private_key_pem:
            try:
                headers[SIGNATURE_HEADER] = sign_payload(notice, self._private_key_pem)
            except ValueError as exc:
                raise NotificationError(f"notice signing failed: {exc}") from exc
        try:
            response = self._client.post(self._url, content=canonical_dumps(notice), headers=headers)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise NotificationError(f"webhook delivery failed: {exc}") from exc
        logger.debug("auction=%s notice delivered to %s", auction.auction_id, self._url)
