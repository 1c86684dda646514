"""Load auction records from a YAML file into the configured storage backend.

The file holds a top-level ``auctions`` list; each entry needs
``description`` and ``start_date`` and may carry ``auction_id`` and
``closed``. A bare date such as ``1999-02-20`` means midnight UTC.

Seeding needs a persistent backend (redis or firestore): the in_memory
backend would only fill this process's own store.
"""

from __future__ import annotations

import sys
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any

import yaml

from auction_closer.auctions.models import Auction
from auction_closer.config import get_closer_config
from auction_closer.storage import build_repository
from auction_closer.transport.timestamps import parse_timestamp

EPHEMERAL_BACKENDS = frozenset({"in_memory"})


def coerce_start_date(value: Any) -> datetime:
    if isinstance(value, str):
        return parse_timestamp(value)
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    raise ValueError(f"start_date must be an ISO-8601 string or date, got {value!r}")


def load_auctions(path: Path) -> list[Auction]:
    data = yaml.safe_load(path.read_text()) or {}
    auctions = []
    for item in data.get("auctions", []):
        kwargs: dict[str, Any] = {
            "description": str(item["description"]),
            "start_date": coerce_start_date(item["start_date"]),
            "closed": bool(item.get("closed", False)),
        }
        if item.get("auction_id"):
            kwargs["auction_id"] = str(item["auction_id"])
        auctions.append(Auction(**kwargs))
    return auctions


def main(argv: list[str]) -> int:
    if len(argv) != 1:
        print("usage: seed_auctions.py <auctions.yaml>", file=sys.stderr)
        return 2
    config = get_closer_config()
    if config.storage.backend in EPHEMERAL_BACKENDS:
        print(
            f"storage backend {config.storage.backend!r} does not outlive this process; "
            "configure redis or firestore to seed auctions",
            file=sys.stderr,
        )
        return 1
    repository = build_repository(config)
    auctions = load_auctions(Path(argv[0]))
    for auction in auctions:
        repository.add(auction)
    print(f"seeded {len(auctions)} auction(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
