"""Application lifespan event handlers.

This module defines the lifespan context manager that handles:
- Application startup: Configure logging
- Application shutdown: Flush pending trace spans
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from app.core.config import Settings, get_settings
from app.observability import get_logger, setup_logging, shutdown_tracing


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

logger = get_logger(__name__)


def _startup(settings: Settings) -> None:
    """Initialize application services during startup.

    Args:
        settings: Application settings.
    """
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
        log_file=settings.logging.file,
    )

    logger.info(
        "Starting application",
        app_name=settings.app.name,
        version=settings.app.version,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )


def _shutdown() -> None:
    """Shutdown application services."""
    logger.info("Shutting down application")

    # Flush pending spans
    shutdown_tracing()

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None - control returns to the application to handle requests.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    _startup(settings)
    yield
    _shutdown()
