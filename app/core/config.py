from __future__ import annotations

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

OPENWEATHER_CURRENT_URL = "https://api.openweathermap.org/data/2.5/weather"

PORT = 8080


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    env: str = Field(default="development", validation_alias="APP_ENV")
    docs_enabled: bool = Field(default=True, validation_alias="DOCS_ENABLED")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    mongo_uri: str = Field(min_length=1, validation_alias="MONGO_URI")
    mongo_database: str = Field(
        default="weatherdb", min_length=1, max_length=64, validation_alias="MONGO_DATABASE"
    )
    mongo_collection: str = Field(
        default="weather", min_length=1, max_length=120, validation_alias="MONGO_COLLECTION"
    )
    mongo_timeout_ms: int = Field(
        default=10_000, ge=1000, le=120_000, validation_alias="MONGO_TIMEOUT_MS"
    )

    base_url: AnyHttpUrl = Field(
        default=OPENWEATHER_CURRENT_URL, validation_alias="BASE_URL"
    )
    api_key: str = Field(default="", validation_alias="API_KEY")
    weather_timeout_seconds: float = Field(
        default=10.0, ge=1.0, le=30.0, validation_alias="WEATHER_TIMEOUT_SECONDS"
    )

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"


def load_settings() -> Settings:
    return Settings()
