"""Shared auction data structures."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..transport.timestamps import format_timestamp, parse_timestamp
from ..validation.validator import get_schema_registry


def _new_auction_id() -> str:
    return f"auc_{uuid.uuid4().hex}"


@dataclass(eq=False)
class Auction:
    description: str
    start_date: datetime
    closed: bool = False
    auction_id: str = field(default_factory=_new_auction_id)

    def close(self) -> None:
        self.closed = True

    def to_record(self) -> dict[str, Any]:
        return {
            "auction_id": self.auction_id,
            "description": self.description,
            "start_date": format_timestamp(self.start_date),
            "closed": self.closed,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Auction":
        """Build an auction from its stored form.

        Raises ``jsonschema.ValidationError`` when the record does not match
        ``schemas/auction.json`` and ``TimestampError`` for an unparsable
        start date.
        """
        get_schema_registry().validate("auction", record)
        return cls(
            description=record["description"],
            start_date=parse_timestamp(record["start_date"]),
            closed=bool(record["closed"]),
            auction_id=record["auction_id"],
        )


@dataclass(frozen=True)
class ClosingResult:
    total_closed: int = 0
