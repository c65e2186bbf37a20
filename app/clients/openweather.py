from __future__ import annotations

import logging
from typing import Any

import httpx

from app.core.config import OPENWEATHER_CURRENT_URL
from app.core.errors import UpstreamError, UpstreamParseError, UpstreamUnavailable
from app.models.weather import CurrentConditions

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float,
        base_url: str = OPENWEATHER_CURRENT_URL,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._api_key = api_key
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def fetch_current_conditions(self, city: str) -> CurrentConditions:
        try:
            resp = self._client.get(
                self._base_url, params={"appid": self._api_key, "q": city}
            )
        except httpx.HTTPError as e:
            logger.warning("Weather provider request for %r failed: %s", city, e)
            raise UpstreamUnavailable() from e

        if not resp.is_success:
            logger.warning(
                "Weather provider returned HTTP %s for %r", resp.status_code, city
            )
            raise UpstreamError()

        try:
            payload = resp.json()
        except ValueError as e:
            raise UpstreamParseError() from e
        return self._parse_conditions(payload)

    @staticmethod
    def _parse_conditions(payload: Any) -> CurrentConditions:
        if not isinstance(payload, dict):
            raise UpstreamParseError("Unexpected weather provider response shape")

        conditions = payload.get("weather")
        if not isinstance(conditions, list) or not conditions:
            raise UpstreamParseError("Weather provider response contained no conditions")
        first = conditions[0]
        description = first.get("description") if isinstance(first, dict) else None
        if not isinstance(description, str):
            raise UpstreamParseError("Unexpected conditions entry shape")

        main = payload.get("main")
        temp = main.get("temp") if isinstance(main, dict) else None
        # bool is an int subclass; a JSON true is not a temperature.
        if isinstance(temp, bool) or not isinstance(temp, (int, float)):
            raise UpstreamParseError("Weather provider response contained no temperature")

        name = payload.get("name")
        if not isinstance(name, str) or not name:
            raise UpstreamParseError("Weather provider response contained no city name")

        return CurrentConditions(
            name=name,
            description=description,
            temperature_kelvin=float(temp),
        )
