"""Closing pass over the current auctions."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from ..notify.base import NotificationError, Notifier
from ..storage.base import AuctionRepository, RepositoryError
from .clock import Clock, SystemClock
from .models import Auction, ClosingResult

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD_DAYS = 7


def age_in_days(start: datetime, now: datetime) -> int:
    """Whole calendar days between ``start`` and ``now``.

    Naive values are read as UTC and ``start`` is moved into ``now``'s
    timezone before the dates are compared, so the result does not depend on
    the time of day either instant carries.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    start = start.astimezone(now.tzinfo)
    return (now.date() - start.date()).days


class AuctionCloser:
    def __init__(
        self,
        repository: AuctionRepository,
        notifier: Notifier,
        *,
        clock: Clock | None = None,
        threshold_days: int = DEFAULT_THRESHOLD_DAYS,
    ) -> None:
        if int(threshold_days) < 1:
            raise ValueError("threshold_days must be a positive number of days")
        self._repository = repository
        self._notifier = notifier
        self._clock = clock or SystemClock()
        self._threshold_days = int(threshold_days)

    @property
    def threshold_days(self) -> int:
        return self._threshold_days

    def is_eligible(self, auction: Auction, now: datetime) -> bool:
        if auction.closed:
            return False
        return age_in_days(auction.start_date, now) >= self._threshold_days

    def run(self) -> ClosingResult:
        # Fetch failures propagate: without the list there is nothing to decide on.
        auctions = self._repository.list_current() or []
        now = self._clock.now()
        total_closed = 0
        for auction in auctions:
            if not self.is_eligible(auction, now):
                continue
            if self._close(auction):
                total_closed += 1
        logger.info(
            "closing pass finished: %d of %d auction(s) closed", total_closed, len(auctions)
        )
        return ClosingResult(total_closed=total_closed)

    def _close(self, auction: Auction) -> bool:
        """Close one auction; True once the update is persisted.

        Failures stay local to this auction: a failed update skips the notice
        and the count, a failed notice only loses the notice.
        """
        auction.close()
        try:
            self._repository.persist_update(auction)
        except RepositoryError as exc:
            logger.warning("auction=%s update failed, skipping notice: %s", auction.auction_id, exc)
            return False
        except Exception:
            logger.exception("auction=%s update raised unexpectedly, skipping notice", auction.auction_id)
            return False
        logger.info("auction=%s closed", auction.auction_id)
        try:
            self._notifier.send_closing_notice(auction)
        except NotificationError as exc:
            logger.warning("auction=%s closing notice failed: %s", auction.auction_id, exc)
        except Exception:
            logger.exception("auction=%s closing notice raised unexpectedly", auction.auction_id)
        return True
