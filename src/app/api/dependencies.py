"""FastAPI dependencies for service access.

This module provides reusable dependencies for accessing application services
in FastAPI route handlers. Services are created by the application factory
and stored in app.state.
"""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from app.services.conversion.service import AirFryerConversionService


async def get_conversion_service(request: Request) -> AirFryerConversionService:
    """Get the conversion service from app state.

    Args:
        request: The incoming request.

    Returns:
        Shared AirFryerConversionService.

    Raises:
        HTTPException: 503 if service is not initialized.
    """
    service: AirFryerConversionService | None = getattr(
        request.app.state, "conversion_service", None
    )
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Conversion service not available",
        )
    return service
