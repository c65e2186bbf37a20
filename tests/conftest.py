from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.factory import create_app
from tests.fakes import FakeWeatherClient, FakeWeatherRepository


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        docs_enabled=False,
        log_level="DEBUG",
        mongo_uri="mongodb://example.com:27017",
        mongo_database="test",
        mongo_collection="weather",
        mongo_timeout_ms=1000,
        base_url="http://provider.example.com/data/2.5/weather",
        api_key="test-key",
        weather_timeout_seconds=1.0,
    )


@pytest.fixture()
def weather_repo() -> FakeWeatherRepository:
    return FakeWeatherRepository()


@pytest.fixture()
def weather_client() -> FakeWeatherClient:
    return FakeWeatherClient()


@pytest.fixture()
def client(
    settings: Settings,
    weather_repo: FakeWeatherRepository,
    weather_client: FakeWeatherClient,
) -> TestClient:
    app = create_app(settings, repository=weather_repo, weather_client=weather_client)
    with TestClient(app) as client:
        yield client
