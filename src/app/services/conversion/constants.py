"""Constants for the air fryer conversion rules.

Contains:
- Gas mark to Celsius lookup table
- Per-oven temperature reductions and time multipliers
- Rounding increments for air fryer settings
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, NamedTuple


# =============================================================================
# Gas Marks
# =============================================================================

GAS_MARK_TO_CELSIUS: Final[MappingProxyType[float, float]] = MappingProxyType(
    {
        0.25: 110.0,
        0.5: 120.0,
        1.0: 140.0,
        2.0: 150.0,
        3.0: 160.0,
        4.0: 180.0,
        5.0: 190.0,
        6.0: 200.0,
        7.0: 220.0,
        8.0: 230.0,
        9.0: 240.0,
    }
)


# =============================================================================
# Oven Adjustments
# =============================================================================


class OvenAdjustment(NamedTuple):
    """Temperature reduction (degrees C) and time multiplier for an oven type."""

    temperature_reduction: float
    time_multiplier: float


CONVENTIONAL_ADJUSTMENT: Final[OvenAdjustment] = OvenAdjustment(20.0, 0.75)
FAN_ADJUSTMENT: Final[OvenAdjustment] = OvenAdjustment(10.0, 0.85)


# =============================================================================
# Rounding
# =============================================================================

TEMPERATURE_INCREMENT: Final[int] = 5
MIN_COOKING_TIME_MINUTES: Final[int] = 1
MIN_DURATION_MINUTES: Final[int] = 1
# Largest duration accepted, the range of a signed 32-bit integer
MAX_DURATION_MINUTES: Final[int] = 2**31 - 1
