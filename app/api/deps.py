from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.clients.openweather import OpenWeatherClient
from app.repositories.weather import WeatherRepository
from app.services.weather import WeatherService


def get_weather_repository(request: Request) -> WeatherRepository:
    return request.app.state.weather_repository


def get_weather_client(request: Request) -> OpenWeatherClient:
    return request.app.state.weather_client


def get_weather_service(
    repo: Annotated[WeatherRepository, Depends(get_weather_repository)],
    provider: Annotated[OpenWeatherClient, Depends(get_weather_client)],
) -> WeatherService:
    return WeatherService(repo=repo, provider=provider)
