"""Health check schemas."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from app.schemas.base import APIResponse


class HealthResponse(APIResponse):
    """Liveness check response."""

    status: str = Field(..., description="Health status", examples=["UP"])
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Current server timestamp (ISO 8601)",
    )
    service: str = Field(
        ...,
        description="Service identifier",
        examples=["air-fryer-conversion-api"],
    )
    version: str = Field(..., description="Service version", examples=["0.1.0"])
