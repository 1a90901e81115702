"""Core patterns module.

Provides reusable design patterns for the application.
"""

from .singleton import ContextScopedSingleton

__all__ = ["ContextScopedSingleton"]
