"""Air fryer conversion service.

Turns an oven temperature and cooking time into air fryer settings:
- Normalizes the temperature to Celsius
- Applies the oven type's temperature reduction and time multiplier
- Rounds to practical air fryer increments (5 degrees, whole minutes)

All rounding uses Python's round(), which rounds exact halves to the nearest
even integer (30 min conventional -> 22.5 -> 22, 30 min fan -> 25.5 -> 26).
"""

from __future__ import annotations

import math

from app.observability.logging import get_logger
from app.observability.metrics import record_conversion
from app.observability.tracing import add_span_attributes, get_tracer
from app.services.conversion.constants import (
    CONVENTIONAL_ADJUSTMENT,
    FAN_ADJUSTMENT,
    MIN_COOKING_TIME_MINUTES,
    TEMPERATURE_INCREMENT,
    OvenAdjustment,
)
from app.services.conversion.exceptions import TemperatureOutOfRangeError
from app.services.conversion.models import (
    ConversionRequest,
    ConversionResult,
    OvenType,
)
from app.services.conversion.temperature import celsius_to_fahrenheit, to_celsius


logger = get_logger(__name__)
tracer = get_tracer(__name__)

_ADJUSTMENTS: dict[OvenType, OvenAdjustment] = {
    OvenType.CONVENTIONAL: CONVENTIONAL_ADJUSTMENT,
    OvenType.GAS: CONVENTIONAL_ADJUSTMENT,
    OvenType.FAN: FAN_ADJUSTMENT,
}


def round_to_minute(minutes: float) -> int:
    """Round a cooking time to whole minutes, never below one minute."""
    return max(MIN_COOKING_TIME_MINUTES, round(minutes))


def round_to_increment(temperature: float, increment: int = TEMPERATURE_INCREMENT) -> int:
    """Round a temperature to the nearest multiple of ``increment``."""
    return round(temperature / increment) * increment


class AirFryerConversionService:
    """Converts oven settings to air fryer settings.

    The service is stateless; a single instance is shared across requests.

    Example:
        service = AirFryerConversionService()
        result = service.convert(
            ConversionRequest(
                temperature=180,
                temperature_unit=TemperatureUnit.C,
                duration=30,
                oven_type=OvenType.FAN,
            )
        )
        # ConversionResult(air_fryer_time=26, air_fryer_temp_c=170, air_fryer_temp_f=340)
    """

    def adjustment_for(self, oven_type: OvenType) -> OvenAdjustment:
        """Return the temperature reduction and time multiplier for an oven type."""
        return _ADJUSTMENTS[oven_type]

    def convert(self, request: ConversionRequest) -> ConversionResult:
        """Convert oven settings to air fryer settings.

        Args:
            request: Validated oven settings.

        Returns:
            Rounded air fryer time and temperatures.

        Raises:
            InvalidGasMarkError: If a gas mark temperature is not in the table.
            TemperatureOutOfRangeError: If the converted temperature is not finite.
        """
        with tracer.start_as_current_span("air_fryer.convert"):
            add_span_attributes(
                **{
                    "conversion.oven_type": request.oven_type.value,
                    "conversion.temperature_unit": request.temperature_unit.value,
                }
            )

            celsius = to_celsius(request.temperature, request.temperature_unit)
            adjustment = self.adjustment_for(request.oven_type)

            raw_temp_c = celsius - adjustment.temperature_reduction
            # Fahrenheit comes from the unrounded Celsius value
            raw_temp_f = celsius_to_fahrenheit(raw_temp_c)
            raw_time = request.duration * adjustment.time_multiplier

            if not (math.isfinite(raw_temp_c) and math.isfinite(raw_temp_f)):
                raise TemperatureOutOfRangeError(request.temperature)

            result = ConversionResult(
                air_fryer_time=round_to_minute(raw_time),
                air_fryer_temp_c=round_to_increment(raw_temp_c),
                air_fryer_temp_f=round_to_increment(raw_temp_f),
            )

        logger.debug(
            "Converted oven settings",
            oven_type=request.oven_type.value,
            temperature_unit=request.temperature_unit.value,
            raw_temp_c=raw_temp_c,
            raw_time=raw_time,
            air_fryer_time=result.air_fryer_time,
            air_fryer_temp_c=result.air_fryer_temp_c,
        )
        record_conversion(request.oven_type.value, request.temperature_unit.value)

        return result
