from __future__ import annotations

from typing import Protocol

from app.models.weather import WeatherRecord


class WeatherRepository(Protocol):
    def ping(self) -> None: ...

    def ensure_indexes(self) -> None: ...

    def upsert(self, record: WeatherRecord) -> None: ...

    def find_by_city(self, city: str) -> WeatherRecord | None: ...
