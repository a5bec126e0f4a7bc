"""Conversion endpoint.

Provides:
- GET /convert for converting oven settings to air fryer settings
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_conversion_service
from app.core.exceptions import ValidationFailedError
from app.observability.logging import get_logger
from app.schemas.conversion import ConversionData, ConversionInput, ConversionResponse
from app.services.conversion.constants import (
    MAX_DURATION_MINUTES,
    MIN_DURATION_MINUTES,
)
from app.services.conversion.models import ConversionRequest, OvenType, TemperatureUnit
from app.services.conversion.service import AirFryerConversionService  # noqa: TC001


logger = get_logger(__name__)

router = APIRouter(tags=["Air Fryer Conversion"])

_ERROR_EXAMPLE = {
    "success": False,
    "error": {
        "code": "INVALID_PARAMETER",
        "message": "Invalid oven_type: grill. Must be one of: CONVENTIONAL, FAN, GAS",
        "field": "oven_type",
    },
}


@router.get(
    "/convert",
    response_model=ConversionResponse,
    summary="Convert oven settings to air fryer settings",
    description=(
        "Converts cooking time and temperature from a conventional, fan or gas "
        "oven to air fryer settings.\n\n"
        "Temperature reductions: conventional/gas -20°C, fan -10°C.\n\n"
        "Time multipliers: conventional/gas ×0.75, fan ×0.85.\n\n"
        "Results are rounded to practical air fryer increments "
        "(5 degrees, whole minutes, at least 1 minute)."
    ),
    responses={
        400: {
            "description": "Missing, invalid or out of range parameters",
            "content": {"application/json": {"example": _ERROR_EXAMPLE}},
        },
    },
)
async def convert(
    service: Annotated[AirFryerConversionService, Depends(get_conversion_service)],
    temperature: Annotated[
        float,
        Query(
            allow_inf_nan=False,
            description="Temperature value or gas mark number",
            examples=[180],
        ),
    ],
    temperature_unit: Annotated[
        str,
        Query(
            description="Temperature unit: C, F or GAS (GAS requires oven_type GAS)",
            examples=["C"],
        ),
    ],
    duration: Annotated[
        int,
        Query(
            le=MAX_DURATION_MINUTES,
            description="Oven cooking time in minutes",
            examples=[30],
        ),
    ],
    oven_type: Annotated[
        str,
        Query(
            description="Oven type: CONVENTIONAL, FAN or GAS",
            examples=["FAN"],
        ),
    ],
) -> ConversionResponse:
    """Convert oven settings to air fryer settings.

    Args:
        service: Shared conversion service.
        temperature: Oven temperature, or gas mark when temperature_unit is GAS.
        temperature_unit: Case-insensitive temperature unit token.
        duration: Oven cooking time in minutes.
        oven_type: Case-insensitive oven type token.

    Returns:
        The air fryer settings and an echo of the parsed input.

    Raises:
        InvalidTokenError: If a unit or oven type token is unknown.
        ValidationFailedError: If duration is below one minute.
        InvalidCombinationError: If a gas mark is given for a non-gas oven.
        InvalidGasMarkError: If the gas mark is not in the table.
        TemperatureOutOfRangeError: If the converted temperature is not finite.
    """
    unit = TemperatureUnit.parse(temperature_unit)
    oven = OvenType.parse(oven_type)

    if duration < MIN_DURATION_MINUTES:
        raise ValidationFailedError(
            "Duration must be at least 1 minute",
            field="duration",
        )

    request = ConversionRequest(
        temperature=temperature,
        temperature_unit=unit,
        duration=duration,
        oven_type=oven,
    )
    result = service.convert(request)

    logger.info(
        "Conversion complete",
        oven_type=oven.value,
        temperature_unit=unit.value,
        air_fryer_time=result.air_fryer_time,
    )

    return ConversionResponse(
        data=ConversionData.from_result(result),
        input=ConversionInput.from_request(request),
    )
