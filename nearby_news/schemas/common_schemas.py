# schemas/common_schemas.py

"""
Common API schemas used across the service.
"""

from datetime import datetime, timezone
from typing import Dict, Optional

from pydantic import BaseModel, Field


class HealthCheckSchema(BaseModel):
    """Health check response DTO."""

    status: str = Field(..., description="Service health status")
    service: str = Field(..., description="Service name")
    version: str = Field("1.0.0", description="Service version")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    dependencies: Optional[Dict[str, str]] = Field(
        None, description="Dependency health status"
    )


class ErrorResponseSchema(BaseModel):
    """Error response DTO."""

    success: bool = False
    error: str = Field(..., description="Error kind")
    message: str = Field(..., description="Human-readable error message")
