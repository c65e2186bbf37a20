"""Error taxonomy shared by the provider client, the store and the routes.

Every error carries the HTTP status it is reported with and a short,
human-readable default message. Handlers registered by the application
factory render them as plain text.
"""

from __future__ import annotations

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match


class WeatherServiceError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(WeatherServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "City is required"


class NotFound(WeatherServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Weather data not found"


class UpstreamUnavailable(WeatherServiceError):
    default_message = "Failed to fetch weather data"


class UpstreamError(WeatherServiceError):
    default_message = "Failed to fetch weather data from API"


class UpstreamParseError(WeatherServiceError):
    default_message = "Failed to parse weather data"


class StorageError(WeatherServiceError):
    default_message = "Failed to update weather data"


async def weather_error_handler(request: Request, exc: WeatherServiceError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    in_body = any(err.get("loc", ("",))[0] == "body" for err in exc.errors())
    message = "Invalid request body" if in_body else "Invalid request parameters"
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    headers = dict(exc.headers or {})
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        # Starlette only reports the first route matching the path.
        headers["Allow"] = ", ".join(_allowed_methods(request))
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=headers)


def _allowed_methods(request: Request) -> list[str]:
    methods: set[str] = set()
    for route in request.app.router.routes:
        route_methods = getattr(route, "methods", None)
        if not route_methods:
            continue
        match, _ = route.matches(request.scope)
        if match != Match.NONE:
            methods.update(route_methods)
    return sorted(methods)
