"""Service settings loaded from environment variables."""

import os
import logging
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_API_HOST, DEFAULT_API_PORT, DEFAULT_LOG_LEVEL

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class AppSettings(BaseModel):
    """Service configuration from environment variables."""

    log_level: str = Field(
        default_factory=lambda: os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        validate_default=True,
        description="Root logging level",
    )

    api_host: str = Field(
        default_factory=lambda: os.getenv("API_HOST", DEFAULT_API_HOST),
        description="Interface the HTTP server binds to",
    )

    api_port: int = Field(
        default_factory=lambda: int(os.getenv("API_PORT", str(DEFAULT_API_PORT))),
        validate_default=True,
        description="Port the HTTP server listens on",
    )

    api_prefix: str = Field(
        default_factory=lambda: os.getenv("API_PREFIX", "/api/v1"),
        description="Path prefix for versioned routes",
    )

    debug: bool = Field(
        default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true",
        description="Enable auto-reload and verbose error messages",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {v}")
        return level

    @field_validator("api_port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError(f"API_PORT must be 1-65535, got {v}")
        return v


# Global settings instance
_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """
    Get or create the settings singleton.

    Returns:
        AppSettings: Settings read from the environment on first call
    """
    global _settings

    if _settings is None:
        _settings = AppSettings()
        logger.debug(
            f"Settings loaded: log_level={_settings.log_level} "
            f"api={_settings.api_host}:{_settings.api_port} debug={_settings.debug}"
        )

    return _settings


def reset_settings() -> None:
    """Reset settings singleton (for testing)."""
    global _settings
    _settings = None
