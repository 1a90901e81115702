"""Response models for the HTTP surface."""

from datetime import datetime
from typing import Literal, Optional, Dict, Any

from pydantic import BaseModel, Field

from ..constants import APP_WIDE_CONFIGURATION, SERVICE_VERSION


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = Field(default=False, examples=[False])
    error: str = Field(..., examples=["Internal server error"])
    message: Optional[str] = Field(default=None, examples=["An unexpected error occurred"])
    details: Optional[Dict[str, Any]] = None
    request_id: Optional[str] = Field(default=None, examples=["1a2b3c4d"])


class ConfigResponse(BaseModel):
    """Configuration value as seen from one request's execution context."""
    success: bool = True
    config: str = Field(..., examples=[APP_WIDE_CONFIGURATION])
    context_id: str = Field(..., description="Execution context that owns the holder")
    same_instance: bool = Field(
        ...,
        description="Every lookup within the request returned the same holder",
    )
    request_id: Optional[str] = None


class HealthStatus(BaseModel):
    """Service health status."""
    status: Literal["healthy"] = Field(default="healthy", examples=["healthy"])
    version: str = Field(default=SERVICE_VERSION, examples=[SERVICE_VERSION])
    timestamp: datetime
    components: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
