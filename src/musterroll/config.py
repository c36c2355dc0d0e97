"""Lightweight configuration for the Musterroll tools."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    catalog_path: Path = Field(
        default=Path("data/catalog.json"), description="JSON snapshot of the reference catalog"
    )
    catalog_tables_dir: Path | None = Field(
        default=None,
        description="Directory of pipe-delimited catalog exports used when no snapshot exists",
    )
    max_leaders_per_unit: int = Field(
        default=2, ge=1, description="Maximum characters attached to one unit"
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )
    log_level: str = Field(default="info", description="Log level handed to uvicorn")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    settings = Settings()
    settings.catalog_path.parent.mkdir(parents=True, exist_ok=True)
    return settings
