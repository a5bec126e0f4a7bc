"""Shared test fixtures and configuration for the Air Fryer Conversion API tests.

This module provides pytest fixtures that are used across multiple test modules,
including test settings and a ready-to-use conversion service.
"""

from __future__ import annotations

import os

import pytest


# Select the test YAML overrides before any settings are loaded
os.environ.setdefault("APP_ENV", "test")

from app.core.config import Settings  # noqa: E402
from app.core.config.settings import (  # noqa: E402
    LoggingSettings,
    MetricsSettings,
    ObservabilitySettings,
    TracingSettings,
)
from app.services.conversion.models import (  # noqa: E402
    ConversionRequest,
    OvenType,
    TemperatureUnit,
)
from app.services.conversion.service import AirFryerConversionService  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    """Settings for the test environment with tracing disabled."""
    return Settings(
        APP_ENV="test",
        logging=LoggingSettings(level="DEBUG", format="text"),
        observability=ObservabilitySettings(
            tracing=TracingSettings(enabled=False),
            metrics=MetricsSettings(enabled=True),
        ),
    )


@pytest.fixture
def conversion_service() -> AirFryerConversionService:
    """Create a conversion service."""
    return AirFryerConversionService()


@pytest.fixture
def celsius_request() -> ConversionRequest:
    """180 degrees C for 30 minutes in a conventional oven."""
    return ConversionRequest(
        temperature=180,
        temperature_unit=TemperatureUnit.C,
        duration=30,
        oven_type=OvenType.CONVENTIONAL,
    )
