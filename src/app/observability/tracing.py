"""OpenTelemetry tracing for the conversion API.

Requests are traced through the FastAPI instrumentation, and each conversion
opens an `air_fryer.convert` span carrying the oven type and temperature unit.
Spans go to an OTLP collector when `observability.tracing.otlp_endpoint` is
set, or to the console in development.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from app.core.config import get_settings
from app.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from app.core.config import Settings

logger = get_logger(__name__)

_EXCLUDED_URLS = "health,metrics,docs,redoc,openapi.json"


def setup_tracing(app: FastAPI, settings: Settings | None = None) -> None:
    """Install the tracer provider and instrument the app.

    Does nothing when tracing is disabled in settings. Health, metrics and
    documentation routes are not traced.

    Args:
        app: The FastAPI application instance.
        settings: Optional settings override. If not provided, uses get_settings().
    """
    if settings is None:
        settings = get_settings()

    if not settings.observability.tracing.enabled:
        logger.info("Tracing disabled")
        return

    logger.info("Setting up tracing", service=settings.app.service_id)

    resource = Resource.create(
        {
            "service.name": settings.app.service_id,
            "service.version": settings.app.version,
            "deployment.environment": settings.APP_ENV,
        }
    )

    provider = TracerProvider(resource=resource)

    if settings.observability.tracing.otlp_endpoint:
        otlp_exporter = OTLPSpanExporter(
            endpoint=settings.observability.tracing.otlp_endpoint,
            insecure=True,
        )
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
        logger.info(
            "OTLP trace exporter configured",
            endpoint=settings.observability.tracing.otlp_endpoint,
        )
    elif settings.is_development:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        logger.info("Console trace exporter configured (development mode)")

    trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(
        app,
        excluded_urls=_EXCLUDED_URLS,
    )

    logger.info("Tracing configured", excluded_urls=_EXCLUDED_URLS)


def shutdown_tracing() -> None:
    """Flush pending spans and shut the tracer provider down.

    Called from the application lifespan on shutdown. A no-op when tracing
    was never set up.
    """
    provider = trace.get_tracer_provider()
    if isinstance(provider, TracerProvider):
        provider.shutdown()
        logger.info("Tracing shutdown complete")


def get_tracer(name: str) -> trace.Tracer:
    """Return a tracer for opening spans around service calls."""
    return trace.get_tracer(name)


def get_current_span() -> trace.Span:
    """Get the currently active span."""
    return trace.get_current_span()


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span, if one is recording.

    Args:
        **attributes: Key-value pairs to add to the span.
    """
    span = get_current_span()
    if span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)


__all__ = [
    "add_span_attributes",
    "get_current_span",
    "get_tracer",
    "setup_tracing",
    "shutdown_tracing",
]
