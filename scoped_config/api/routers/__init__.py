"""API routers package."""

from .config import router as config_router
from .health import router as health_router

__all__ = [
    "config_router",
    "health_router",
]
