"""Custom middleware for execution contexts, logging, and error handling."""

import logging
import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from ..constants import REQUEST_ID_LENGTH
from ..core.context import execution_context
from ..core.exceptions import ScopedConfigError

logger = logging.getLogger(__name__)


class ExecutionContextMiddleware(BaseHTTPMiddleware):
    """Run every request inside its own execution context and log it."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = uuid.uuid4().hex[:REQUEST_ID_LENGTH]
        request.state.request_id = request_id

        start_time = time.time()
        logger.info(
            f"[{request_id}] {request.method} {request.url.path} "
            f"- Client: {request.client.host if request.client else 'unknown'}"
        )

        with execution_context(
            name=f"{request.method} {request.url.path}",
            context_id=request_id,
        ):
            response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"[{request_id}] {request.method} {request.url.path} "
            f"- Status: {response.status_code} - Duration: {duration_ms:.1f}ms"
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time-MS"] = f"{duration_ms:.1f}"

        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Global error handling for unhandled exceptions."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            request_id = getattr(request.state, "request_id", "unknown")
            logger.exception(f"[{request_id}] Unhandled exception: {e}")

            return JSONResponse(
                status_code=500,
                content={
                    "success": False,
                    "error": "Internal server error",
                    "message": str(e) if logger.isEnabledFor(logging.DEBUG) else "An unexpected error occurred",
                    "request_id": request_id,
                }
            )


def add_middleware(app: FastAPI) -> None:
    """Add all custom middleware to the application."""
    # Last added runs first: the execution context wraps error handling
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(ExecutionContextMiddleware)


# =============================================================================
# Exception Handlers
# =============================================================================

async def scoped_config_exception_handler(request: Request, exc: ScopedConfigError):
    """Handle misuse of scoped singletons with a structured 500 body."""
    request_id = getattr(request.state, "request_id", "unknown")
    logger.error(f"[{request_id}] {type(exc).__name__}: {exc.message}")

    content = exc.to_response_dict()
    content["request_id"] = request_id
    return JSONResponse(status_code=500, content=content)


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", "unknown")
    logger.error(f"[{request_id}] HTTP {exc.status_code} - {exc.detail} - Path: {request.url.path}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "status_code": exc.status_code,
            "request_id": request_id,
        }
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers."""
    app.add_exception_handler(ScopedConfigError, scoped_config_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
