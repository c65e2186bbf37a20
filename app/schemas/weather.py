from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.weather import WeatherRecord


class WeatherUpdate(BaseModel):
    city: str | None = None


class WeatherRead(BaseModel):
    city: str = Field(min_length=1)
    description: str
    temp: float
    last_updated: datetime

    @classmethod
    def from_record(cls, record: WeatherRecord) -> WeatherRead:
        return cls(
            city=record.city,
            description=record.description,
            temp=record.temperature,
            last_updated=record.last_updated,
        )
