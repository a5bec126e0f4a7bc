"""Exceptions for the conversion service.

Domain errors raised while parsing or converting oven settings. The API layer
translates all of them into INVALID_PARAMETER responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterable


class ConversionError(Exception):
    """Base exception for conversion service errors."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            field: Optional request parameter the error relates to.
        """
        self.message = message
        self.field = field
        super().__init__(message)


class InvalidTokenError(ConversionError):
    """Raised when an enumeration token cannot be parsed."""

    def __init__(
        self,
        field: str,
        value: str,
        allowed: Iterable[str],
    ) -> None:
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Invalid {field}: {value}. Must be one of: {', '.join(self.allowed)}",
            field=field,
        )


class InvalidGasMarkError(ConversionError):
    """Raised when a temperature is not one of the known gas marks."""

    def __init__(self, value: float, valid_marks: list[float]) -> None:
        self.value = value
        self.valid_marks = valid_marks
        super().__init__(f"Invalid gas mark: {value}. Valid gas marks: {valid_marks}")


class InvalidCombinationError(ConversionError):
    """Raised when a gas mark is given for a non-gas oven."""

    def __init__(self) -> None:
        super().__init__(
            "When temperature_unit is GAS, oven_type must be 'GAS'. "
            "Gas marks are specific to gas ovens only."
        )


class TemperatureOutOfRangeError(ConversionError):
    """Raised when a temperature is too large to convert to a finite result."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(
            f"Temperature {value} is out of range for conversion",
            field="temperature",
        )
