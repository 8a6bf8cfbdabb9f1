"""Status Schemas — response models for the welcome, health and error bodies.

Invariants:
    - timestamp serializes as ISO-8601
    - HealthResponse.uptime is bounded below by 0
"""

from datetime import datetime

from pydantic import BaseModel, Field


class WelcomeResponse(BaseModel):
    """Body of GET /."""
    message: str
    status: str
    timestamp: datetime


class HealthResponse(BaseModel):
    """Body of GET /api/health."""
    status: str
    uptime: float = Field(ge=0, description="Seconds since process start")
    timestamp: datetime


class ErrorResponse(BaseModel):
    """Body of any 500 produced by the fallback error handler."""
    error: str
    message: str
