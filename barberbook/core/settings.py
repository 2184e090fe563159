"""Application settings using Pydantic Settings for typed configuration.

This module centralizes all configuration and provides type-safe access to settings.
Settings are loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    env_name: str = Field(default="development", alias="ENV_NAME")

    # Persistence slots (session pointer + theme)
    database_url: str = Field(
        default="sqlite:///./barberbook.db", alias="DATABASE_URL"
    )

    # CORS
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # Domain store
    store_latency_ms: int = Field(default=500, alias="STORE_LATENCY_MS", ge=0)
    store_short_latency_ms: int = Field(
        default=300, alias="STORE_SHORT_LATENCY_MS", ge=0
    )
    seed_data: bool = Field(default=True, alias="SEED_DATA")

    # Preferences
    default_theme: Literal["light", "dark"] = Field(
        default="dark", alias="DEFAULT_THEME"
    )

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        origins = []
        for o in self.cors_origins.split(","):
            trimmed = o.strip()
            if trimmed:
                origins.append(trimmed)
        return origins

    @computed_field
    @property
    def store_latency(self) -> float:
        """Simulated latency for long store operations, in seconds."""
        return self.store_latency_ms / 1000.0

    @computed_field
    @property
    def store_short_latency(self) -> float:
        """Simulated latency for short store operations, in seconds."""
        return self.store_short_latency_ms / 1000.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
