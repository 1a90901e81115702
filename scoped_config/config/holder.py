"""Configuration holder scoped to the active execution context.

Usage:
    from scoped_config.config import ConfigurationHolder

    holder = ConfigurationHolder.get_instance()
    holder.get_config()  # "App-wide configuration loaded"
"""

import logging

from ..constants import APP_WIDE_CONFIGURATION
from ..core.exceptions import ImmutableConfigurationError
from ..core.patterns import ContextScopedSingleton

logger = logging.getLogger(__name__)


class ConfigurationHolder(ContextScopedSingleton):
    """Read-only holder of the app-wide configuration value.

    One instance per execution context, built lazily by get_instance().
    The value is fixed at construction and cannot be changed afterwards.
    """

    __slots__ = ("_configuration_value",)

    def _initialize(self) -> None:
        object.__setattr__(self, "_configuration_value", APP_WIDE_CONFIGURATION)
        logger.info("Configuration holder initialized")

    @property
    def configuration_value(self) -> str:
        return self._configuration_value

    def get_config(self) -> str:
        """Return the configuration value."""
        return self._configuration_value

    def __setattr__(self, name: str, value: object) -> None:
        raise ImmutableConfigurationError(type(self).__name__, name)

    def __delattr__(self, name: str) -> None:
        raise ImmutableConfigurationError(type(self).__name__, name)

    # Read-only, so a copy is the holder itself
    def __copy__(self) -> "ConfigurationHolder":
        return self

    def __deepcopy__(self, memo: dict) -> "ConfigurationHolder":
        return self

    def __repr__(self) -> str:
        return f"ConfigurationHolder(configuration_value={self._configuration_value!r})"


def get_instance() -> ConfigurationHolder:
    """Get the configuration holder for the active execution context."""
    return ConfigurationHolder.get_instance()


def get_config() -> str:
    """Get the configuration value from the active context's holder."""
    return ConfigurationHolder.get_instance().get_config()


__all__ = ["ConfigurationHolder", "get_instance", "get_config"]
