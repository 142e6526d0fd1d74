"""Participant persistence on a MongoDB collection."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Protocol

import pymongo
from bson.errors import BSONError
from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ..core.errors import StoreError
from ..models import Participant

logger = logging.getLogger(__name__)


class ParticipantStore(Protocol):
    """What the ingest and query services need from persistence."""

    def record_shot(self, roll_number: str, name: str, shot: int, played_at: datetime) -> None:
        ...

    def list_by_score(self) -> List[Participant]:
        ...


class MongoParticipantStore:
    """Store participants as documents keyed uniquely by ``rollNumber``.

    Each call runs under ``pymongo.timeout`` so a slow server surfaces as a
    :class:`StoreError` instead of blocking the handler. Nothing is retried.
    """

    def __init__(self, collection: Collection, timeout: float = 5.0) -> None:
        self.collection = collection
        self.timeout = float(timeout)

    def ensure_indexes(self) -> None:
        """Create the unique roll-number index; failures are only logged."""

        try:
            with pymongo.timeout(self.timeout):
                self.collection.create_index([("rollNumber", ASCENDING)], unique=True)
        except PyMongoError:
            logger.warning("Could not ensure unique index on rollNumber", exc_info=True)

    def record_shot(self, roll_number: str, name: str, shot: int, played_at: datetime) -> None:
        """Add ``shot`` to the participant's score, creating it when unseen."""

        update = {
            "$inc": {"score": shot},
            "$set": {"lastPlayed": played_at, "name": name},
            "$setOnInsert": {"rollNumber": roll_number},
        }
        try:
            with pymongo.timeout(self.timeout):
                self.collection.update_one({"rollNumber": roll_number}, update, upsert=True)
        except (PyMongoError, BSONError, OverflowError) as exc:
            raise StoreError("Error updating score") from exc

    def list_by_score(self) -> List[Participant]:
        try:
            with pymongo.timeout(self.timeout):
                cursor = self.collection.find({}, {"_id": 0}).sort("score", DESCENDING)
                docs = list(cursor)
        except PyMongoError as exc:
            raise StoreError("Error fetching scoreboard") from exc

        try:
            return [Participant.from_document(doc) for doc in docs]
        except (KeyError, ValueError) as exc:
            raise StoreError("Error decoding data") from exc


__all__ = ["MongoParticipantStore", "ParticipantStore"]
