"""Lazily-built configuration holder scoped to one execution context."""

from .config import ConfigurationHolder, get_instance, get_config
from .core import (
    ExecutionContext,
    execution_context,
    DirectInstantiationError,
    ImmutableConfigurationError,
    ScopedConfigError,
)
from .constants import SERVICE_VERSION

__version__ = SERVICE_VERSION
__all__ = [
    "ConfigurationHolder",
    "get_instance",
    "get_config",
    "ExecutionContext",
    "execution_context",
    "DirectInstantiationError",
    "ImmutableConfigurationError",
    "ScopedConfigError",
]
