"""Configuration API endpoint."""

import logging

from fastapi import APIRouter, Depends, Request

from ...config import ConfigurationHolder
from ...core.context import ensure_context
from ..schemas import ConfigResponse, ErrorResponse

logger = logging.getLogger(__name__)
router = APIRouter()


async def get_configuration_holder() -> ConfigurationHolder:
    """Resolve the holder owned by the current request's execution context."""
    return ConfigurationHolder.get_instance()


@router.get(
    "",
    response_model=ConfigResponse,
    responses={500: {"model": ErrorResponse, "description": "Internal server error"}},
    operation_id="getConfig",
    summary="Read the app-wide configuration value",
)
async def read_config(
    request: Request,
    holder: ConfigurationHolder = Depends(get_configuration_holder),
) -> ConfigResponse:
    """
    Return the configuration value for this request.

    The holder is built lazily the first time it is requested inside the
    request's execution context; later lookups in the same request reuse it.
    A new request always starts with a new holder.
    """
    again = ConfigurationHolder.get_instance()
    context = ensure_context()

    return ConfigResponse(
        config=holder.get_config(),
        context_id=context.context_id,
        same_instance=again is holder,
        request_id=getattr(request.state, "request_id", None),
    )
