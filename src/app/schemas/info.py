"""API information schema.

Static metadata describing the service and the endpoints it exposes.
"""

from __future__ import annotations

from pydantic import Field

from app.schemas.base import APIResponse


class InfoResponse(APIResponse):
    """Response model for the info endpoint."""

    name: str = Field(
        ...,
        description="API name",
        examples=["Air Fryer Conversion API"],
    )
    version: str = Field(..., description="API version", examples=["0.1.0"])
    description: str = Field(..., description="What the API does")
    endpoints: dict[str, str] = Field(
        ...,
        description="Available endpoints keyed by method and path",
    )
    documentation: dict[str, str] = Field(
        ...,
        description="Documentation links keyed by title",
    )
