"""
Kuji Configuration

Loads configuration from environment variables and an optional .env file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from kuji.constants import SAMPLES_COUNT_DEFAULT


class Settings(BaseSettings):
    """Kuji settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KUJI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Replay a session by pinning its seed (KUJI_SEED=12345)
    seed: int | None = Field(default=None, ge=0)

    # Values drawn per GenConfig.samples call
    samples_count: int = Field(default=SAMPLES_COUNT_DEFAULT, ge=0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
