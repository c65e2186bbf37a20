from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_weather_service
from app.schemas.weather import WeatherRead, WeatherUpdate
from app.services.weather import WeatherService

router = APIRouter(prefix="/weather")


@router.get("", response_model=WeatherRead)
def get_weather(
    service: Annotated[WeatherService, Depends(get_weather_service)],
    city: Annotated[str | None, Query()] = None,
) -> WeatherRead:
    record = service.retrieve_stored(city)
    return WeatherRead.from_record(record)


@router.put("", response_model=WeatherRead)
def put_weather(
    payload: WeatherUpdate,
    service: Annotated[WeatherService, Depends(get_weather_service)],
) -> WeatherRead:
    record = service.fetch_and_store(payload.city)
    return WeatherRead.from_record(record)
