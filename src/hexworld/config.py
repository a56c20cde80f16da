"""Lightweight configuration for the hexworld tools."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    default_grid_radius: int = Field(default=16, ge=0, description="Radius of the country disk")
    default_num_countries: int = Field(
        default=20, ge=0, description="Countries requested when the client does not say"
    )
    default_map_width: int = Field(default=60, ge=1, description="Rectangular map width in hexes")
    default_map_height: int = Field(default=40, ge=1, description="Rectangular map height in hexes")
    default_map_seed: int = Field(
        default=12345, description="Seed used for the rectangular map when none is given"
    )
    hex_size: float = Field(default=30.0, gt=0.0, description="Hex radius in pixels")
    max_grid_radius: int = Field(default=64, ge=1, description="Largest radius clients may request")
    max_map_dimension: int = Field(
        default=200, ge=1, description="Largest width or height clients may request"
    )
    cache_max_entries: int = Field(
        default=32, ge=1, description="Generated worlds kept in memory by the API"
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
