"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Storage
    data_dir: str = "data"
    trips_file: str = "trips.json"
    places_file: str = "places_cache.json"
    settings_file: str = "settings.json"

    # Defaults for the settings document
    default_currency: str = "USD"

    # External APIs (empty means sample data)
    opentripmap_api_key: str = ""

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
