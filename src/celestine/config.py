"""Engine configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    # Ephemeris
    ephe_path: str = Field(default="", alias="SWISSEPH_EPHE_PATH")
    phase_search_days: float = Field(default=30.0, gt=0, alias="CELESTINE_PHASE_SEARCH_DAYS")

    # Readings
    reading_salt: str = Field(default="veya-cosmic-v3", alias="CELESTINE_READING_SALT")
    summary_aspect_limit: int = Field(default=8, ge=0, alias="CELESTINE_SUMMARY_ASPECT_LIMIT")

    # Logging
    log_level: str = Field(default="INFO", alias="CELESTINE_LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()
