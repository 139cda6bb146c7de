"""Central configuration management using pydantic-settings.

All configuration is loaded from environment variables with sensible defaults.
Create a .env file for local development (see .env.example).
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PODCAST_ID = "bdb43d4d-bd1d-4fbc-bd60-40f1e3299aa3"


class SimplecastSettings(BaseSettings):
    """Simplecast API configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SIMPLECAST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # The site build used to expose the token as VITE_SIMPLECAST_TOKEN
    token: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("SIMPLECAST_TOKEN", "VITE_SIMPLECAST_TOKEN"),
        description="Bearer token for the Simplecast API",
    )
    podcast_id: str = Field(default=DEFAULT_PODCAST_ID, description="Simplecast podcast ID")
    base_url: str = Field(default="https://api.simplecast.com", description="API base URL")
    limit: int = Field(default=1000, description="Episodes requested per call")
    offset: int = Field(default=0, description="Offset of the first episode requested")
    timeout_seconds: float | None = Field(
        default=None, description="HTTP timeout (None waits indefinitely)"
    )
    max_attempts: int = Field(default=1, ge=1, description="Attempts on transport errors")
    retry_backoff_seconds: float = Field(
        default=1.0, ge=0, description="Exponential backoff multiplier between attempts"
    )

    @property
    def episodes_url(self) -> str:
        """Episode listing endpoint for the configured podcast."""
        return f"{self.base_url.rstrip('/')}/podcasts/{self.podcast_id}/episodes"


class Settings(BaseSettings):
    """Main application settings aggregating all config sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_json: bool = Field(default=False, description="Render logs as JSON")

    # Sub-configurations
    simplecast: SimplecastSettings = Field(default_factory=SimplecastSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings loaded from environment.
    """
    return Settings()
