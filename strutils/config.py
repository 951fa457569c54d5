"""
Configuration management for strutils.

Uses pydantic-settings for type-safe configuration with environment variable support.
Only ambient behaviour is configurable here; function defaults such as the mask
character or pad character are part of the public API and never read from settings.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables (prefix ``STRUTILS_``)."""

    model_config = SettingsConfigDict(
        env_prefix="STRUTILS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(
        default=False,
        description="Render log events as JSON instead of console output"
    )

    # -------------------------------------------------------------------------
    # Randomness
    # -------------------------------------------------------------------------
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for the process-wide default random source (None = OS entropy)"
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the current settings instance."""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
