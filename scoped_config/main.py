"""
FastAPI service exposing the request-scoped configuration holder.

Usage:
    uvicorn scoped_config.main:app --reload --host 0.0.0.0 --port 8001
"""

import logging

from dotenv import load_dotenv

# Load environment variables before reading settings
load_dotenv()

from scoped_config.config import get_settings
from scoped_config.constants import LOG_FORMAT, SERVICE_NAME

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format=LOG_FORMAT,
)
logger = logging.getLogger(__name__)

from scoped_config.api import create_app

app = create_app()

logger.info(f"{SERVICE_NAME} initialized")
logger.info("API documentation available at /docs and /redoc")


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "scoped_config.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
