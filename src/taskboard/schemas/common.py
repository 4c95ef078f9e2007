"""
Common/shared Pydantic schemas.

This module contains reusable schemas used across the application:
- Error responses
- Health check responses
"""

import uuid
from pydantic import AfterValidator, BaseModel, Field
from typing import Annotated, Optional, Any, Dict
from datetime import datetime

from taskboard.core.clock import utc_now


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str
    detail: Optional[Any] = None
    error_code: Optional[str] = None
    success: bool = False
    timestamp: datetime = Field(default_factory=utc_now)


class HealthCheckResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: datetime = Field(default_factory=utc_now)
    database: Optional[Dict[str, Any]] = None


def _check_uuid(value: str) -> str:
    try:
        return str(uuid.UUID(value))
    except (ValueError, AttributeError, TypeError):
        raise ValueError("must be a valid UUID")


# UUID carried as its canonical lowercase string form
UUIDStr = Annotated[str, AfterValidator(_check_uuid)]


class IdRequest(BaseModel):
    """Input for procedures addressed by a single record id."""
    id: UUIDStr
