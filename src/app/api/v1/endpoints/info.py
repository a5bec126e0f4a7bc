"""API information endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.schemas.info import InfoResponse


router = APIRouter(tags=["API Information"])


@router.get(
    "/info",
    response_model=InfoResponse,
    summary="Get API information",
    description="Returns API metadata, available endpoints, and documentation links.",
)
async def info(
    settings: Annotated[Settings, Depends(get_settings)],
) -> InfoResponse:
    """Return static metadata about the API."""
    prefix = settings.api.v1_prefix

    documentation: dict[str, str] = {}
    if settings.is_non_production:
        documentation["OpenAPI Specification"] = f"{prefix}/openapi.json"
        documentation["Swagger UI"] = f"{prefix}/docs"
    if settings.api.repository_url:
        documentation["Source Repository"] = settings.api.repository_url

    return InfoResponse(
        name=settings.app.name,
        version=settings.app.version,
        description=settings.app.description,
        endpoints={
            f"GET {prefix}/convert": "Convert oven settings to air fryer settings",
            f"GET {prefix}/health": "Check application health status",
            f"GET {prefix}/info": "Get API information and documentation",
        },
        documentation=documentation,
    )
