"""
Execution context for scoped singletons.

An execution context is one logical unit of work: an explicit scope, an
HTTP request, or the ambient context of the current thread or asyncio task.
Scoped singletons keep their instances inside the active context, so nothing
leaks from one unit of work into the next.

Usage:
    from scoped_config.core.context import execution_context

    with execution_context(name="nightly-import") as ctx:
        # Any scoped singleton created here belongs to ctx
        holder = ConfigurationHolder.get_instance()
"""

import asyncio
import functools
import logging
import threading
import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Per thread / per task storage for the active context
_current: ContextVar[Optional["ExecutionContext"]] = ContextVar(
    "execution_context", default=None
)


def _new_context_id() -> str:
    return uuid.uuid4().hex[:8]


@dataclass
class ExecutionContext:
    """One unit of work owning its scoped singleton instances."""

    context_id: str = field(default_factory=_new_context_id)
    name: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    owner: Any = field(default=None, repr=False)
    _instances: Dict[type, Any] = field(default_factory=dict, repr=False)

    def lookup(self, cls: type) -> Optional[Any]:
        """Return the instance registered for cls, if any."""
        return self._instances.get(cls)

    def register(self, cls: type, instance: Any) -> None:
        self._instances[cls] = instance

    def discard(self, cls: type) -> Optional[Any]:
        return self._instances.pop(cls, None)

    def __len__(self) -> int:
        return len(self._instances)


def _current_owner() -> Any:
    """Identify the running task, or the thread when no task is running."""
    try:
        task = asyncio.current_task()
    except RuntimeError:
        task = None
    return task if task is not None else threading.get_ident()


def get_current_context() -> Optional[ExecutionContext]:
    """
    Get the active execution context.

    An ambient context created by another task or thread is not visible
    here, even when it was inherited through a copied contextvars context.

    Returns:
        ExecutionContext if one is active, None otherwise
    """
    ctx = _current.get()
    if ctx is not None and ctx.owner is not None and ctx.owner != _current_owner():
        return None
    return ctx


def ensure_context() -> ExecutionContext:
    """
    Get the active execution context, creating an ambient one if needed.

    The ambient context is owned by the current task (or thread, outside
    asyncio). Child tasks and threads never reuse it; each builds its own.
    Jobs run back to back on one pooled worker thread share that thread's
    ambient context unless wrapped with scoped().

    Returns:
        The active ExecutionContext
    """
    ctx = get_current_context()
    if ctx is None:
        ctx = ExecutionContext(name="ambient", owner=_current_owner())
        _current.set(ctx)
        logger.debug(f"Ambient execution context created: {ctx.context_id}")
    return ctx


def set_context(context: ExecutionContext) -> Token:
    """
    Make a context active.

    Args:
        context: ExecutionContext to activate

    Returns:
        Token that restores the previous context when passed to reset_context
    """
    return _current.set(context)


def reset_context(token: Token) -> None:
    """
    Restore the context that was active before set_context returned token.

    Args:
        token: Token returned by set_context
    """
    _current.reset(token)


def clear_context() -> None:
    """Deactivate the current execution context."""
    _current.set(None)


@contextmanager
def execution_context(
    name: Optional[str] = None,
    context_id: Optional[str] = None,
):
    """
    Context manager running a block inside a fresh execution context.

    The previous context (if any) is restored on exit, including when the
    block raises. Nested scopes each get their own instances.

    Args:
        name: Optional label used in logs
        context_id: Optional identifier, e.g. a request id

    Yields:
        ExecutionContext: The newly opened context

    Example:
        with execution_context(name="batch-42") as ctx:
            value = get_config()
    """
    ctx = ExecutionContext(context_id=context_id or _new_context_id(), name=name)
    token = _current.set(ctx)
    logger.debug(f"Execution context opened: {ctx.context_id} ({name or 'unnamed'})")
    try:
        yield ctx
    finally:
        _current.reset(token)
        logger.debug(
            f"Execution context closed: {ctx.context_id} "
            f"({len(ctx)} scoped instance(s) released)"
        )


def scoped(func: Callable[..., T], name: Optional[str] = None) -> Callable[..., T]:
    """
    Wrap func so every call runs in its own execution context.

    Use for jobs handed to a thread pool, where workers are reused.

    Example:
        executor.submit(scoped(get_instance))
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        with execution_context(name=name or getattr(func, "__name__", None)):
            return func(*args, **kwargs)

    return wrapper


__all__ = [
    "ExecutionContext",
    "execution_context",
    "scoped",
    "get_current_context",
    "ensure_context",
    "set_context",
    "reset_context",
    "clear_context",
]
