"""Temperature normalization between Celsius, Fahrenheit and gas marks."""

from __future__ import annotations

from app.services.conversion.constants import GAS_MARK_TO_CELSIUS
from app.services.conversion.exceptions import InvalidGasMarkError
from app.services.conversion.models import TemperatureUnit


def valid_gas_marks() -> list[float]:
    """Return the supported gas marks in ascending order."""
    return sorted(GAS_MARK_TO_CELSIUS)


def to_celsius(value: float, unit: TemperatureUnit) -> float:
    """Convert a temperature in any supported unit to Celsius.

    Gas marks are looked up by exact value; 4.0 is valid, 4.5 is not.

    Raises:
        InvalidGasMarkError: If unit is GAS and value is not a known gas mark.
    """
    value = float(value)

    if unit is TemperatureUnit.C:
        return value
    if unit is TemperatureUnit.F:
        return (value - 32) * 5 / 9

    celsius = GAS_MARK_TO_CELSIUS.get(value)
    if celsius is None:
        raise InvalidGasMarkError(value, valid_gas_marks())
    return celsius


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32
