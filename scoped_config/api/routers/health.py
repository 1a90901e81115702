"""Health check API endpoint."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from ...config import ConfigurationHolder
from ..schemas import HealthStatus

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthStatus,
    operation_id="getHealth",
    summary="Check service health",
)
async def health_check():
    """
    Check the health of the service.

    Reports the configuration value resolved inside this request's context.
    """
    return HealthStatus(
        timestamp=datetime.now(timezone.utc),
        components={
            "configuration": {
                "status": "healthy",
                "message": ConfigurationHolder.get_instance().get_config(),
            },
        },
    )
