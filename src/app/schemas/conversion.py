"""Conversion endpoint schemas.

This module contains the response body of the convert endpoint: the
air fryer settings plus an echo of the oven settings they came from.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from app.schemas.base import APIResponse
from app.services.conversion.models import (
    ConversionRequest,
    ConversionResult,
    OvenType,
    TemperatureUnit,
)


class ConversionData(APIResponse):
    """Air fryer settings."""

    air_fryer_time: int = Field(
        ...,
        ge=1,
        description="Air fryer cooking time in minutes",
        examples=[22],
    )
    air_fryer_temp_c: int = Field(
        ...,
        description="Air fryer temperature in Celsius (multiple of 5)",
        examples=[160],
    )
    air_fryer_temp_f: int = Field(
        ...,
        description="Air fryer temperature in Fahrenheit (multiple of 5)",
        examples=[320],
    )

    @classmethod
    def from_result(cls, result: ConversionResult) -> ConversionData:
        """Build from a conversion result."""
        return cls(
            air_fryer_time=result.air_fryer_time,
            air_fryer_temp_c=result.air_fryer_temp_c,
            air_fryer_temp_f=result.air_fryer_temp_f,
        )


class ConversionInput(APIResponse):
    """Echo of the oven settings that were converted."""

    temperature: float = Field(..., description="Oven temperature or gas mark")
    temperature_unit: TemperatureUnit = Field(..., description="Temperature unit")
    duration: int = Field(..., description="Oven cooking time in minutes")
    oven_type: OvenType = Field(..., description="Oven type")

    @classmethod
    def from_request(cls, request: ConversionRequest) -> ConversionInput:
        """Build from a conversion request."""
        return cls(
            temperature=request.temperature,
            temperature_unit=request.temperature_unit,
            duration=request.duration,
            oven_type=request.oven_type,
        )


class ConversionResponse(APIResponse):
    """Successful conversion response."""

    success: Literal[True] = True
    data: ConversionData
    input: ConversionInput
