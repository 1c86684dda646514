"""Firestore storage backend leveraging google-cloud-firestore."""

from __future__ import annotations

import logging
from typing import Any

from google.api_core import exceptions as google_exceptions
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter
from google.oauth2 import service_account
from jsonschema import ValidationError

from ..auctions.models import Auction
from ..transport.timestamps import TimestampError
from .base import RepositoryError

logger = logging.getLogger(__name__)


class FirestoreAuctionRepository:
    def __init__(
        self,
        *,
        project_id: str,
        collection: str = "auctions",
        credentials_path: str | None = None,
    ) -> None:
        if not project_id:
            raise ValueError("project_id required for firestore backend")
        client_kwargs: dict[str, Any] = {"project": project_id}
        if credentials_path:
            client_kwargs["credentials"] = service_account.Credentials.from_service_account_file(
                credentials_path
            )
        self._client = firestore.Client(**client_kwargs)
        self._collection_name = collection

    def _collection(self):
        return self._client.collection(self._collection_name)

    def _decode(self, data: dict[str, Any]) -> Auction:
        try:
            return Auction.from_record(data)
        except (ValidationError, TimestampError) as exc:
            raise RepositoryError(f"malformed auction record: {exc}") from exc

    def add(self, auction: Auction) -> Auction:
        try:
            self._collection().document(auction.auction_id).set(auction.to_record())
        except google_exceptions.GoogleAPIError as exc:
            raise RepositoryError(f"firestore write failed: {exc}") from exc
        return auction

    def get(self, auction_id: str) -> Auction:
        try:
            doc = self._collection().document(auction_id).get()
        except google_exceptions.GoogleAPIError as exc:
            raise RepositoryError(f"firestore read failed: {exc}") from exc
        if not doc.exists:
            raise KeyError(auction_id)
        return self._decode(doc.to_dict())

    def list_current(self) -> list[Auction]:
        query = self._collection().where(filter=FieldFilter("closed", "==", False))
        try:
            docs = list(query.stream())
        except google_exceptions.GoogleAPIError as exc:
            raise RepositoryError(f"firestore query failed: {exc}") from exc
        auctions = []
        for doc in docs:
            try:
                auctions.append(self._decode(doc.to_dict()))
            except RepositoryError as exc:
                logger.warning("skipping undecodable auction document %s: %s", doc.id, exc)
        return auctions

    def persist_update(self, auction: Auction) -> None:
        try:
            self._collection().document(auction.auction_id).update(auction.to_record())
        except google_exceptions.NotFound as exc:
            raise RepositoryError(f"auction {auction.auction_id} not found") from exc
        except google_exceptions.GoogleAPIError as exc:
            raise RepositoryError(f"firestore write failed: {exc}") from exc
