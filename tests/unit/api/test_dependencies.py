"""Unit tests for API dependencies."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

from app.api.dependencies import get_conversion_service
from app.services.conversion.service import AirFryerConversionService


pytestmark = pytest.mark.unit


class TestGetConversionService:
    """Tests for get_conversion_service."""

    @pytest.mark.asyncio
    async def test_returns_service_from_app_state(self) -> None:
        """Should return the service stored on app.state."""
        service = AirFryerConversionService()
        request = MagicMock()
        request.app.state = SimpleNamespace(conversion_service=service)

        assert await get_conversion_service(request) is service

    @pytest.mark.asyncio
    async def test_raises_503_when_missing(self) -> None:
        """Should raise 503 when the service was never created."""
        request = MagicMock()
        request.app.state = SimpleNamespace()

        with pytest.raises(HTTPException) as exc_info:
            await get_conversion_service(request)

        assert exc_info.value.status_code == 503
