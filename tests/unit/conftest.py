"""Unit test configuration.

Unit tests should be fast and isolated - no external dependencies.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_settings() -> MagicMock:
    """Settings stand-in for calling endpoint functions directly."""
    settings = MagicMock()
    settings.app.name = "Air Fryer Conversion API"
    settings.app.service_id = "air-fryer-conversion-api"
    settings.app.version = "0.1.0"
    settings.app.description = "Convert oven settings to air fryer settings"
    settings.api.v1_prefix = "/api/v1"
    settings.api.repository_url = None
    settings.is_non_production = True
    return settings
