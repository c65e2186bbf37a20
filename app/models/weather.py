from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CurrentConditions:
    name: str
    description: str
    temperature_kelvin: float


@dataclass(frozen=True)
class WeatherRecord:
    city: str
    description: str
    temperature: float
    last_updated: datetime
