from __future__ import annotations

import logging
from datetime import timezone
from typing import Any

from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.core.errors import StorageError
from app.models.weather import WeatherRecord

logger = logging.getLogger(__name__)

CITY_INDEX_NAME = "city_unique"


class MongoWeatherRepository:
    def __init__(self, *, collection: Collection) -> None:
        self._collection = collection

    def ping(self) -> None:
        try:
            self._collection.database.command("ping")
        except PyMongoError as e:
            raise StorageError("Document store unavailable") from e

    def ensure_indexes(self) -> None:
        # Filtering on city alone cannot stop two first writes for a new city
        # from both inserting; the unique index can.
        self._collection.create_index(
            [("city", ASCENDING)], name=CITY_INDEX_NAME, unique=True
        )

    def upsert(self, record: WeatherRecord) -> None:
        try:
            self._collection.replace_one(
                {"city": record.city}, _to_document(record), upsert=True
            )
        except PyMongoError as e:
            logger.exception("Failed to upsert weather data for %r", record.city)
            raise StorageError() from e

    def find_by_city(self, city: str) -> WeatherRecord | None:
        try:
            doc = self._collection.find_one({"city": city}, projection={"_id": False})
        except PyMongoError as e:
            logger.exception("Failed to read weather data for %r", city)
            raise StorageError("Failed to read weather data") from e
        if doc is None:
            return None
        return _from_document(doc)


def _to_document(record: WeatherRecord) -> dict[str, Any]:
    return {
        "city": record.city,
        "description": record.description,
        "temp": float(record.temperature),
        "last_updated": record.last_updated,
    }


def _from_document(doc: dict[str, Any]) -> WeatherRecord:
    try:
        last_updated = doc["last_updated"]
        if last_updated.tzinfo is None:
            last_updated = last_updated.replace(tzinfo=timezone.utc)
        return WeatherRecord(
            city=str(doc["city"]),
            description=str(doc["description"]),
            temperature=float(doc["temp"]),
            last_updated=last_updated,
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise StorageError("Stored weather data is malformed") from e
