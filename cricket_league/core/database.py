"""MongoDB connection bootstrap."""

from __future__ import annotations

import logging

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .config import CONNECT_TIMEOUT_SECONDS, MONGODB_COLLECTION, MONGODB_DB, MONGODB_URI
from .errors import StartupError

logger = logging.getLogger(__name__)


def connect(
    uri: str = MONGODB_URI,
    database: str = MONGODB_DB,
    collection: str = MONGODB_COLLECTION,
    timeout: float = CONNECT_TIMEOUT_SECONDS,
) -> tuple[MongoClient, Collection]:
    """Open a client, verify it with a ping and return the participant collection.

    Any failure here is fatal: the caller is expected to let the
    :class:`StartupError` abort the process.
    """

    timeout_ms = int(timeout * 1000)
    try:
        client: MongoClient = MongoClient(
            uri,
            tz_aware=True,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
        )
        client.admin.command("ping")
    except PyMongoError as exc:
        raise StartupError(f"Could not connect to MongoDB: {exc}") from exc

    logger.info("Connected to MongoDB database %r", database)
    return client, client[database][collection]


__all__ = ["connect"]
