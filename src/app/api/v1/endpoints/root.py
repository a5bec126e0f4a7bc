"""Root endpoint for service discovery.

Points clients at the convert operation, with a ready-made example query,
and at the info and health endpoints.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.schemas.root import RootResponse


router = APIRouter(tags=["Root"])

# 180 C for 30 minutes in a fan oven
EXAMPLE_CONVERSION_QUERY = "temperature=180&temperature_unit=C&duration=30&oven_type=FAN"


@router.get(
    "/",
    response_model=RootResponse,
    summary="Service discovery",
    description="Links to the conversion, info and health endpoints.",
)
async def root(
    settings: Annotated[Settings, Depends(get_settings)],
) -> RootResponse:
    """Return the service name and links to its endpoints."""
    prefix = settings.api.v1_prefix

    return RootResponse(
        service=settings.app.name,
        version=settings.app.version,
        status="operational",
        convert=f"{prefix}/convert",
        example=f"{prefix}/convert?{EXAMPLE_CONVERSION_QUERY}",
        info=f"{prefix}/info",
        health=f"{prefix}/health",
        docs=f"{prefix}/docs" if settings.is_non_production else "disabled",
    )
