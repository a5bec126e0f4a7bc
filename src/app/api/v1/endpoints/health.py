"""Health check endpoint.

Provides a liveness probe for Kubernetes and load balancers.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.schemas.health import HealthResponse


router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Check application health",
    description="Returns the current health status of the air fryer conversion API.",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check if the service is alive.

    The service has no external dependencies, so being able to answer
    is all there is to check.
    """
    return HealthResponse(
        status="UP",
        service=settings.app.service_id,
        version=settings.app.version,
    )
