"""
RPC Pydantic Schemas
"""

from typing import Any, Optional
from pydantic import BaseModel


class RPCResponse(BaseModel):
    """Envelope for a successful procedure call."""

    result: Optional[Any] = None


class HealthcheckResult(BaseModel):
    """healthcheck procedure output."""

    status: str
    timestamp: str
