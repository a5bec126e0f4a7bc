"""Root endpoint response schema."""

from __future__ import annotations

from pydantic import Field

from app.schemas.base import APIResponse


class RootResponse(APIResponse):
    """Service discovery document with links to the API's endpoints."""

    service: str = Field(
        ...,
        description="Service name",
        examples=["Air Fryer Conversion API"],
    )
    version: str = Field(
        ...,
        description="Service version",
        examples=["0.1.0"],
    )
    status: str = Field(
        ...,
        description="Service operational status",
        examples=["operational"],
    )
    convert: str = Field(
        ...,
        description="Conversion endpoint URL",
        examples=["/api/v1/convert"],
    )
    example: str = Field(
        ...,
        description="Sample conversion request",
        examples=[
            "/api/v1/convert?temperature=180&temperature_unit=C"
            "&duration=30&oven_type=FAN"
        ],
    )
    info: str = Field(
        ...,
        description="API information endpoint URL",
        examples=["/api/v1/info"],
    )
    health: str = Field(
        ...,
        description="Health check endpoint URL",
        examples=["/api/v1/health"],
    )
    docs: str = Field(
        ...,
        description="API documentation URL, or 'disabled' in production",
        examples=["/api/v1/docs"],
    )
