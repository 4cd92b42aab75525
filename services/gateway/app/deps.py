"""Dependency helpers for the FastAPI gateway."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from services.cats.cats import CatsService


class Settings(BaseSettings):
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(env_prefix="CATS_", env_file=".env", extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


_cats_service = CatsService()


def get_cats_service() -> CatsService:
    """Return the process-wide cat store."""
    return _cats_service
