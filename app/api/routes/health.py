from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_weather_repository
from app.core.errors import StorageError
from app.repositories.weather import WeatherRepository

router = APIRouter()


@router.get("/health", tags=["meta"])
def health(
    repo: Annotated[WeatherRepository, Depends(get_weather_repository)],
) -> dict[str, str]:
    try:
        repo.ping()
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Document store unavailable",
        ) from e
    return {"status": "ok"}
