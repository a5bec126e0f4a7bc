"""Domain models for oven to air fryer conversion.

These are the value objects passed into and returned from the conversion
engine. They are independent of the HTTP representation in app.schemas.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.services.conversion.constants import (
    MAX_DURATION_MINUTES,
    MIN_COOKING_TIME_MINUTES,
    MIN_DURATION_MINUTES,
)
from app.services.conversion.exceptions import (
    InvalidCombinationError,
    InvalidTokenError,
)


class TemperatureUnit(StrEnum):
    """Unit of the oven temperature supplied by the caller."""

    C = "C"
    F = "F"
    GAS = "GAS"

    @classmethod
    def parse(cls, token: str) -> TemperatureUnit:
        """Parse a case-insensitive token such as ``"c"`` or ``"Gas"``.

        Raises:
            InvalidTokenError: If the token is not a known unit.
        """
        unit = _TEMPERATURE_UNIT_TOKENS.get(token.strip().upper())
        if unit is None:
            raise InvalidTokenError("temperature_unit", token, [u.value for u in cls])
        return unit


class OvenType(StrEnum):
    """Type of oven the original recipe was written for."""

    CONVENTIONAL = "CONVENTIONAL"
    FAN = "FAN"
    GAS = "GAS"

    @classmethod
    def parse(cls, token: str) -> OvenType:
        """Parse a case-insensitive token such as ``"fan"``.

        Raises:
            InvalidTokenError: If the token is not a known oven type.
        """
        oven_type = _OVEN_TYPE_TOKENS.get(token.strip().upper())
        if oven_type is None:
            raise InvalidTokenError("oven_type", token, [o.value for o in cls])
        return oven_type


_TEMPERATURE_UNIT_TOKENS: dict[str, TemperatureUnit] = {
    "C": TemperatureUnit.C,
    "F": TemperatureUnit.F,
    "GAS": TemperatureUnit.GAS,
}

_OVEN_TYPE_TOKENS: dict[str, OvenType] = {
    "CONVENTIONAL": OvenType.CONVENTIONAL,
    "FAN": OvenType.FAN,
    "GAS": OvenType.GAS,
}


class ConversionRequest(BaseModel):
    """Oven settings to convert.

    A gas mark temperature is only meaningful for a gas oven; constructing a
    request that pairs TemperatureUnit.GAS with any other oven type raises
    InvalidCombinationError.
    """

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(..., description="Temperature value or gas mark")
    temperature_unit: TemperatureUnit = Field(..., description="Temperature unit")
    duration: int = Field(
        ...,
        ge=MIN_DURATION_MINUTES,
        le=MAX_DURATION_MINUTES,
        description="Oven cooking time in minutes",
    )
    oven_type: OvenType = Field(..., description="Oven type")

    @model_validator(mode="after")
    def _check_gas_mark_oven(self) -> Self:
        if self.temperature_unit is TemperatureUnit.GAS and self.oven_type is not OvenType.GAS:
            raise InvalidCombinationError
        return self


class ConversionResult(BaseModel):
    """Air fryer settings produced by a conversion."""

    model_config = ConfigDict(frozen=True)

    air_fryer_time: int = Field(..., ge=MIN_COOKING_TIME_MINUTES)
    air_fryer_temp_c: int
    air_fryer_temp_f: int
