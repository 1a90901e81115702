"""Context-scoped singleton pattern implementation.

This module provides a reusable base class for singletons whose single
instance lives in the active execution context instead of the process.
Each request, task or explicit scope gets its own lazily-built instance.
"""

import logging
from abc import ABC
from typing import TypeVar

from ..context import ensure_context, get_current_context
from ..exceptions import DirectInstantiationError

logger = logging.getLogger(__name__)

T = TypeVar('T', bound='ContextScopedSingleton')

# Only get_instance() holds this token; direct construction lacks it
_ACCESSOR_TOKEN = object()


class ContextScopedSingleton(ABC):
    """Abstract base class for execution-context-scoped singletons.

    At most one instance of each subclass exists per execution context.
    The instance is created on first access and reused for every later
    access within the same context. Contexts never share instances.

    Usage:
        class MySingleton(ContextScopedSingleton):
            def _initialize(self):
                # One-time initialization logic
                self.some_resource = create_resource()

        # Get instance (creates on first call in this context)
        instance = MySingleton.get_instance()

    Note:
        Subclasses should implement `_initialize()` for one-time setup.
        Calling the class directly raises DirectInstantiationError.
    """

    def __init__(self, _token: object = None) -> None:
        if _token is not _ACCESSOR_TOKEN:
            raise DirectInstantiationError(type(self).__name__)
        self._initialize()

    def _initialize(self) -> None:
        """Override in subclasses for one-time initialization.

        Called exactly once per execution context, when the instance is
        first requested.
        """
        pass

    @classmethod
    def get_instance(cls: type[T]) -> T:
        """Get the instance for the active execution context.

        Returns:
            The context's instance, created on first call.
        """
        context = ensure_context()
        instance = context.lookup(cls)
        if instance is None:
            instance = cls(_ACCESSOR_TOKEN)
            context.register(cls, instance)
            logger.debug(f"{cls.__name__} created in context {context.context_id}")
        return instance

    @classmethod
    def has_instance(cls) -> bool:
        """Return True if the active context already holds an instance."""
        context = get_current_context()
        return context is not None and context.lookup(cls) is not None

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the instance from the active context (primarily for testing).

        The next get_instance() call in the same context builds a new one.
        """
        context = get_current_context()
        if context is None:
            return
        instance = context.discard(cls)
        if instance is not None:
            instance._cleanup()

    def _cleanup(self) -> None:
        """Override in subclasses for cleanup logic.

        Called when reset_instance() is invoked.
        """
        pass
