"""Unit tests for request ID middleware.

Tests cover:
- Request ID generation
- Request ID propagation from headers
- Rejection of malformed client IDs
"""

from __future__ import annotations

import uuid
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.core.middleware.request_id import RequestIDMiddleware, resolve_request_id


pytestmark = pytest.mark.unit


class TestResolveRequestId:
    """Tests for resolve_request_id."""

    def test_keeps_well_formed_id(self) -> None:
        """Should keep a client-supplied ID."""
        assert resolve_request_id("abc-123_x.y") == "abc-123_x.y"

    @pytest.mark.parametrize("candidate", [None, "", "has space", "x" * 129, "a\nb"])
    def test_generates_uuid_otherwise(self, candidate: str | None) -> None:
        """Should replace missing or malformed IDs with a UUID4."""
        result = resolve_request_id(candidate)

        assert result != candidate
        assert uuid.UUID(result).version == 4


class TestRequestIDMiddleware:
    """Tests for RequestIDMiddleware."""

    def test_init_default_header(self) -> None:
        """Should use default header name."""
        middleware = RequestIDMiddleware(MagicMock())
        assert middleware.header_name == "X-Request-ID"

    @pytest.mark.asyncio
    async def test_propagates_existing_request_id(self) -> None:
        """Should reuse the request ID header and echo it back."""
        middleware = RequestIDMiddleware(MagicMock())

        request = MagicMock()
        request.headers = {"X-Request-ID": "req-42"}
        request.state = MagicMock()

        response = MagicMock()
        response.headers = {}
        call_next = AsyncMock(return_value=response)

        with (
            patch("app.core.middleware.request_id.clear_context") as clear,
            patch("app.core.middleware.request_id.bind_context") as bind,
        ):
            result = await middleware.dispatch(request, call_next)

        clear.assert_called_once()
        bind.assert_called_once_with(request_id="req-42")
        assert request.state.request_id == "req-42"
        assert result.headers["X-Request-ID"] == "req-42"

    @pytest.mark.asyncio
    async def test_generates_request_id_when_missing(self) -> None:
        """Should generate a new ID when no header is present."""
        middleware = RequestIDMiddleware(MagicMock())

        request = MagicMock()
        request.headers = {}
        request.state = MagicMock()

        response = MagicMock()
        response.headers = {}
        call_next = AsyncMock(return_value=response)

        with (
            patch("app.core.middleware.request_id.clear_context"),
            patch("app.core.middleware.request_id.bind_context"),
        ):
            result = await middleware.dispatch(request, call_next)

        assert uuid.UUID(result.headers["X-Request-ID"])
