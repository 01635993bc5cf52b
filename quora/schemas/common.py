"""
Quora Backend — Shared Response Schemas
=========================================
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error body for every failed request.

    Example:
        {
            "code": "ATHR-003",
            "message": "Only the question owner can edit the question",
            "request_id": "a1b2c3d4"
        }
    """
    code: str = Field(description="Stable machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
