"""Card stored as one MongoDB document keyed by the card id."""

from __future__ import annotations

import logging
from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from bingo_board.constants import CARD_ID
from bingo_board.errors import PersistenceError
from bingo_board.repositories.base import CardBackend
from bingo_board.repositories.record import BingoCard

logger = logging.getLogger(__name__)

COLLECTION_NAME = "bingo_cards"


def get_mongo_collection(uri: str, db_name: str, timeout: float = 5.0) -> tuple[MongoClient, Collection]:
    """Connect lazily; the first operation fails after ``timeout`` if the server is unreachable."""

    timeout_ms = int(timeout * 1000)
    client: MongoClient = MongoClient(
        uri,
        tz_aware=True,
        serverSelectionTimeoutMS=timeout_ms,
        connectTimeoutMS=timeout_ms,
        socketTimeoutMS=timeout_ms,
        retryWrites=False,
    )
    return client, client[db_name][COLLECTION_NAME]


class MongoCardBackend(CardBackend):
    name = "mongo"

    def __init__(self, collection: Any, client: MongoClient | None = None, card_id: str = CARD_ID) -> None:
        self._collection = collection
        self._client = client
        self._card_id = card_id

    def read(self) -> BingoCard | None:
        try:
            doc = self._collection.find_one({"_id": self._card_id})
        except PyMongoError as exc:
            logger.exception("Failed to read card document %s", self._card_id)
            raise PersistenceError() from exc

        if not doc:
            return None

        try:
            return BingoCard.build(
                card_id=str(doc["_id"]),
                cells=doc.get("cells") or [],
                marked_cells=doc.get("markedCells") or [],
                updated_at=doc["updatedAt"],
            )
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Malformed card document %s: %s", self._card_id, exc)
            raise PersistenceError() from exc

    def write(self, card: BingoCard) -> None:
        doc = {
            "_id": card.id,
            "cells": list(card.cells),
            "markedCells": list(card.marked_cells),
            "updatedAt": card.updated_at,
        }
        try:
            self._collection.replace_one({"_id": card.id}, doc, upsert=True)
        except PyMongoError as exc:
            logger.exception("Failed to write card document %s", card.id)
            raise PersistenceError() from exc

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
