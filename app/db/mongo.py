from __future__ import annotations

import logging

from pymongo import MongoClient
from pymongo.collection import Collection

from app.core.config import Settings

logger = logging.getLogger(__name__)


def create_mongo_client(settings: Settings) -> MongoClient:
    """Connect to MongoDB and ping it; any failure propagates to the caller.

    The client is lazy, so the ping is what actually proves the server is
    reachable at startup.
    """
    client: MongoClient = MongoClient(
        settings.mongo_uri,
        tz_aware=True,
        timeoutMS=settings.mongo_timeout_ms,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
    )
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    logger.info("Connected to MongoDB")
    return client


def get_weather_collection(client: MongoClient, settings: Settings) -> Collection:
    return client[settings.mongo_database][settings.mongo_collection]
