"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from ..config import get_settings
from ..constants import SERVICE_NAME, SERVICE_VERSION
from .middleware import add_middleware, register_exception_handlers
from .routers import config_router, health_router

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {
        "name": "Health",
        "description": "Service health checks and status endpoints",
    },
    {
        "name": "Configuration",
        "description": "Configuration value resolved inside each request's execution context",
    },
]

API_DESCRIPTION = """
Serves an app-wide configuration value through a holder that is built
lazily once per request and never shared between requests.

Every response carries `X-Request-ID`, which is also the id of the
execution context the request ran in.
"""


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    logger.info(f"Starting {SERVICE_NAME} API...")
    yield
    logger.info(f"Shutting down {SERVICE_NAME} API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=SERVICE_NAME,
        description=API_DESCRIPTION,
        version=SERVICE_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # Add custom middleware (execution context, logging, error handling)
    add_middleware(app)

    # Register custom exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(
        health_router,
        tags=["Health"],
    )

    app.include_router(
        config_router,
        prefix=f"{settings.api_prefix}/config",
        tags=["Configuration"],
    )

    return app
