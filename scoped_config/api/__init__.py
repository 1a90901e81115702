"""HTTP surface: one execution context per request."""

from .app import create_app

__all__ = ["create_app"]
