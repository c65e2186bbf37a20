from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Protocol

from app.core.errors import InvalidInput, NotFound
from app.models.weather import CurrentConditions, WeatherRecord
from app.repositories.weather import WeatherRepository

logger = logging.getLogger(__name__)

KELVIN_OFFSET = 273.15


class ConditionsProvider(Protocol):
    def fetch_current_conditions(self, city: str) -> CurrentConditions: ...


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - KELVIN_OFFSET


def _utc_now() -> datetime:
    now = datetime.now(tz=timezone.utc)
    # BSON datetimes only keep milliseconds.
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _require_city(city: str | None) -> str:
    if city is None or not city.strip():
        raise InvalidInput()
    return city


class WeatherService:
    def __init__(
        self,
        *,
        repo: WeatherRepository,
        provider: ConditionsProvider,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._repo = repo
        self._provider = provider
        self._clock = clock

    def retrieve_stored(self, city: str | None) -> WeatherRecord:
        city = _require_city(city)
        record = self._repo.find_by_city(city)
        if record is None:
            raise NotFound()
        return record

    def fetch_and_store(self, city: str | None) -> WeatherRecord:
        city = _require_city(city)
        conditions = self._provider.fetch_current_conditions(city)
        record = WeatherRecord(
            city=conditions.name,
            description=conditions.description,
            temperature=kelvin_to_celsius(conditions.temperature_kelvin),
            last_updated=self._clock(),
        )
        self._repo.upsert(record)
        logger.info("Stored weather data for %r (requested as %r)", record.city, city)
        return record
