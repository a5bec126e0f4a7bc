"""Integration test fixtures.

Provides an application built by the real factory, with the full middleware
stack and exception handlers, served in-process over ASGI.
"""

from __future__ import annotations

import contextlib
import os
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from prometheus_client import REGISTRY

from app.factory import create_app


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator

    from fastapi import FastAPI

    from app.core.config import Settings


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create FastAPI app with test settings.

    Sets METRICS_ENABLED since prometheus-fastapi-instrumentator
    checks it when should_respect_env_var=True.
    """
    original_metrics_enabled = os.environ.get("METRICS_ENABLED")
    os.environ["METRICS_ENABLED"] = "true"

    try:
        return create_app(test_settings)
    finally:
        if original_metrics_enabled is None:
            os.environ.pop("METRICS_ENABLED", None)
        else:
            os.environ["METRICS_ENABLED"] = original_metrics_enabled


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture(autouse=True)
def reset_prometheus_registry() -> Generator[None]:
    """Reset Prometheus registry between tests.

    This prevents 'Duplicated timeseries' errors when creating
    multiple app instances in tests.
    """
    collectors_before = set(REGISTRY._names_to_collectors.keys())

    yield

    collectors_to_remove = [
        collector
        for name, collector in list(REGISTRY._names_to_collectors.items())
        if name not in collectors_before
    ]

    for collector in collectors_to_remove:
        with contextlib.suppress(Exception):
            REGISTRY.unregister(collector)
