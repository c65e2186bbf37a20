from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.router import api_router
from app.clients.openweather import OpenWeatherClient
from app.core.config import PORT, Settings, load_settings
from app.core.errors import (
    WeatherServiceError,
    http_error_handler,
    validation_error_handler,
    weather_error_handler,
)
from app.core.logging import configure_logging
from app.db.mongo import create_mongo_client, get_weather_collection
from app.repositories.weather import WeatherRepository
from app.repositories.weather_mongo import MongoWeatherRepository

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    repository: WeatherRepository | None = None,
    weather_client: OpenWeatherClient | None = None,
) -> FastAPI:
    """Build the application.

    ``repository`` and ``weather_client`` replace the MongoDB-backed store and
    the OpenWeather client when given; the caller keeps ownership of them.
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        mongo_client = None
        owned_weather_client = None
        try:
            if repository is None:
                try:
                    mongo_client = create_mongo_client(settings)
                except Exception:
                    logger.critical("Failed to connect to MongoDB", exc_info=True)
                    raise
                repo = MongoWeatherRepository(
                    collection=get_weather_collection(mongo_client, settings)
                )
                repo.ensure_indexes()
                app.state.weather_repository = repo
            else:
                app.state.weather_repository = repository

            if weather_client is None:
                if not settings.api_key:
                    logger.warning("API_KEY is not set; provider requests will be rejected")
                owned_weather_client = OpenWeatherClient(
                    api_key=settings.api_key,
                    timeout_seconds=settings.weather_timeout_seconds,
                    base_url=str(settings.base_url),
                )
                app.state.weather_client = owned_weather_client
            else:
                app.state.weather_client = weather_client

            logger.info("Server is running on http://localhost:%d", PORT)
            yield
        finally:
            if owned_weather_client is not None:
                owned_weather_client.close()
            if mongo_client is not None:
                mongo_client.close()

    docs_enabled = settings.docs_enabled and not settings.is_production
    app = FastAPI(
        title="Weather Store API",
        version="0.1.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )

    app.add_exception_handler(WeatherServiceError, weather_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    @app.get("/", tags=["meta"])
    def root():
        return {"name": "weather-store-api", "status": "ok"}

    app.include_router(api_router)
    return app
