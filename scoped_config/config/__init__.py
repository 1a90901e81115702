"""Configuration package: the scoped configuration holder and service settings."""

from .holder import ConfigurationHolder, get_instance, get_config
from .settings import AppSettings, get_settings, reset_settings

__all__ = [
    "ConfigurationHolder",
    "get_instance",
    "get_config",
    "AppSettings",
    "get_settings",
    "reset_settings",
]
