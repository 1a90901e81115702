"""Core building blocks: execution contexts, scoped singletons, errors."""

from .context import (
    ExecutionContext,
    execution_context,
    scoped,
    get_current_context,
    ensure_context,
    set_context,
    reset_context,
    clear_context,
)
from .exceptions import (
    ScopedConfigError,
    DirectInstantiationError,
    ImmutableConfigurationError,
)
from .patterns import ContextScopedSingleton

__all__ = [
    # Context
    "ExecutionContext",
    "execution_context",
    "scoped",
    "get_current_context",
    "ensure_context",
    "set_context",
    "reset_context",
    "clear_context",
    # Errors
    "ScopedConfigError",
    "DirectInstantiationError",
    "ImmutableConfigurationError",
    # Patterns
    "ContextScopedSingleton",
]
