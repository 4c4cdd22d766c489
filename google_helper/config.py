"""Centralized configuration using Pydantic Settings.

Endpoints, static map defaults and logging settings live here so that
adapters never hardcode them. The API key is deliberately not part of
the configuration: callers always pass it explicitly.

Configuration can be overridden via environment variables:
- GH_API_GEOCODE_URL=https://...
- GH_MAP_ZOOM=15
- GH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GoogleApiConfig(BaseSettings):
    """Google Maps endpoints.

    Environment variables prefixed with GH_API_.
    """

    model_config = SettingsConfigDict(env_prefix="GH_API_")

    geocode_url: str = "https://maps.googleapis.com/maps/api/geocode/json"
    staticmap_url: str = "https://maps.googleapis.com/maps/api/staticmap"


class StaticMapConfig(BaseSettings):
    """Default styling for static map images.

    Environment variables prefixed with GH_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="GH_MAP_")

    color: str = "red"
    zoom: int = Field(default=13, ge=0, le=21)
    format: Literal["jpg", "jpg-baseline", "png", "png8", "png32", "gif"] = "jpg"
    map_type: Literal["roadmap", "satellite", "terrain", "hybrid"] = "roadmap"
    chunk_size: int = 8192


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with GH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="GH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.api.geocode_url)
        print(config.static_map.zoom)

    Environment variables prefixed with GH_.
    """

    model_config = SettingsConfigDict(env_prefix="GH_")

    api: GoogleApiConfig = Field(default_factory=GoogleApiConfig)
    static_map: StaticMapConfig = Field(default_factory=StaticMapConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
