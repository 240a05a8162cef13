"""Fixture calculator configuration using pydantic-settings.

Settings cover the ambient stack only (logging, API server). The fixture's
range limits are physical constants and live in ``fixturecalc.models.limits``.
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("console", "json")


def _invalid(key_name: str, value: object, allowed: tuple[str, ...]) -> ValueError:
    return ValueError(
        f"{key_name}={value!r} is not valid. Expected one of: {', '.join(allowed)}."
    )


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # API server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_RELOAD: bool = False
    CORS_ORIGINS: list[str] = ["*"]

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in VALID_LOG_LEVELS:
            raise _invalid("LOG_LEVEL", value, VALID_LOG_LEVELS)
        return upper

    @field_validator("LOG_FORMAT")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        lower = value.lower()
        if lower not in VALID_LOG_FORMATS:
            raise _invalid("LOG_FORMAT", value, VALID_LOG_FORMATS)
        return lower


# Singleton instance for import convenience
settings = Settings()
