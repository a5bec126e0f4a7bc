"""Application factory for creating FastAPI instances.

This module provides the create_app factory function that:
- Configures the FastAPI application with appropriate settings
- Sets up middleware stack in the correct order
- Registers exception handlers
- Mounts API routers
- Configures OpenAPI documentation
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from app.api.v1.router import router as v1_router
from app.core.config import Settings, get_settings
from app.core.events.lifespan import lifespan
from app.core.exceptions import setup_exception_handlers
from app.core.middleware import (
    LoggingMiddleware,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimingMiddleware,
)
from app.observability import setup_metrics, setup_tracing
from app.services.conversion.service import AirFryerConversionService


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    prefix = settings.api.v1_prefix
    show_docs = settings.is_non_production

    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description=settings.app.description,
        lifespan=lifespan,
        docs_url=f"{prefix}/docs" if show_docs else None,
        redoc_url=f"{prefix}/redoc" if show_docs else None,
        openapi_url=f"{prefix}/openapi.json" if show_docs else None,
        debug=settings.app.debug,
    )

    # Store settings in app state for access in routes
    app.state.settings = settings

    # The conversion service is stateless; one instance serves every request
    app.state.conversion_service = AirFryerConversionService()

    setup_exception_handlers(app)

    # Setup middleware (order matters - first added = last executed)
    _setup_middleware(app, settings)

    app.include_router(v1_router, prefix=prefix)

    # Setup observability (after routes are mounted)
    setup_tracing(app, settings)
    setup_metrics(app, settings)

    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure middleware stack.

    Middleware is executed in reverse order of addition:
    - Last added middleware runs first on request
    - First added middleware runs first on response

    Order from request perspective:
    1. SecurityHeadersMiddleware (adds security headers)
    2. RequestIDMiddleware (adds request ID for tracing)
    3. TimingMiddleware (measures request time)
    4. LoggingMiddleware (logs requests/responses)
    5. GZipMiddleware (compresses responses)
    6. CORSMiddleware (handles CORS)
    """
    # CORS - must be added first (runs last on request, first on response)
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.api.cors_origins],
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID", "X-Process-Time"],
        )

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    prefix = settings.api.v1_prefix
    app.add_middleware(
        LoggingMiddleware,
        exclude_paths={f"{prefix}/health", f"{prefix}/metrics", "/favicon.ico"},
    )

    app.add_middleware(TimingMiddleware)

    app.add_middleware(RequestIDMiddleware)

    # Security headers (runs first on request)
    app.add_middleware(SecurityHeadersMiddleware)
