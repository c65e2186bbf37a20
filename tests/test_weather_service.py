from __future__ import annotations

from datetime import datetime, timezone

import pytest

from app.core.errors import InvalidInput, NotFound, UpstreamParseError
from app.models.weather import CurrentConditions
from app.services.weather import WeatherService, kelvin_to_celsius
from tests.fakes import FakeWeatherClient, FakeWeatherRepository

FIXED_NOW = datetime(2026, 1, 30, 22, 0, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture()
def service(
    weather_repo: FakeWeatherRepository, weather_client: FakeWeatherClient
) -> WeatherService:
    return WeatherService(repo=weather_repo, provider=weather_client, clock=lambda: FIXED_NOW)


def test_kelvin_to_celsius() -> None:
    assert kelvin_to_celsius(300.0) == pytest.approx(26.85, abs=1e-9)
    assert kelvin_to_celsius(273.15) == pytest.approx(0.0, abs=1e-9)


def test_fetch_and_store_transforms_provider_conditions(service: WeatherService) -> None:
    record = service.fetch_and_store("paris")
    assert record.city == "Paris"
    assert record.description == "clear sky"
    assert record.temperature == pytest.approx(26.85, abs=1e-9)
    assert record.last_updated == FIXED_NOW

    assert service.retrieve_stored("Paris") == record


def test_overwrite_keeps_single_record(
    service: WeatherService,
    weather_repo: FakeWeatherRepository,
    weather_client: FakeWeatherClient,
) -> None:
    service.fetch_and_store("Paris")
    weather_client.responses["Paris"] = CurrentConditions(
        name="Paris", description="light rain", temperature_kelvin=285.15
    )
    service.fetch_and_store("Paris")

    assert weather_repo.count("Paris") == 1
    stored = service.retrieve_stored("Paris")
    assert stored.description == "light rain"
    assert stored.temperature == pytest.approx(12.0, abs=1e-9)


@pytest.mark.parametrize("city", [None, "", " \t"])
def test_invalid_city_never_reaches_collaborators(
    service: WeatherService,
    weather_repo: FakeWeatherRepository,
    weather_client: FakeWeatherClient,
    city,
) -> None:
    with pytest.raises(InvalidInput):
        service.retrieve_stored(city)
    with pytest.raises(InvalidInput):
        service.fetch_and_store(city)
    assert weather_repo.calls == 0
    assert weather_client.requested == []


def test_lookup_is_case_sensitive(service: WeatherService) -> None:
    service.fetch_and_store("Paris")
    with pytest.raises(NotFound):
        service.retrieve_stored("PARIS")


def test_provider_failure_stores_nothing(
    service: WeatherService,
    weather_repo: FakeWeatherRepository,
    weather_client: FakeWeatherClient,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _fail(city: str) -> CurrentConditions:
        raise UpstreamParseError("Weather provider response contained no conditions")

    monkeypatch.setattr(weather_client, "fetch_current_conditions", _fail)
    with pytest.raises(UpstreamParseError):
        service.fetch_and_store("Paris")
    assert weather_repo.calls == 0


def test_default_clock_is_utc_milliseconds(
    weather_repo: FakeWeatherRepository, weather_client: FakeWeatherClient
) -> None:
    record = WeatherService(repo=weather_repo, provider=weather_client).fetch_and_store("Paris")
    assert record.last_updated.tzinfo is not None
    assert record.last_updated.microsecond % 1000 == 0
