"""Conversion service package.

Provides the oven-to-air-fryer conversion engine and the temperature
normalization helpers it builds on.
"""

from __future__ import annotations

from app.services.conversion.models import (
    ConversionRequest,
    ConversionResult,
    OvenType,
    TemperatureUnit,
)
from app.services.conversion.service import AirFryerConversionService


__all__ = [
    "AirFryerConversionService",
    "ConversionRequest",
    "ConversionResult",
    "OvenType",
    "TemperatureUnit",
]
