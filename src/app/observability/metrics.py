"""Prometheus metrics instrumentation.

This module provides:
- FastAPI automatic request metrics
- Conversion counters by oven type and temperature unit
- Metrics endpoint configuration
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator, metrics

from app.core.config import get_settings
from app.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from app.core.config import Settings

logger = get_logger(__name__)

CONVERSIONS_TOTAL = Counter(
    "air_fryer_conversions_total",
    "Number of successful oven to air fryer conversions",
    labelnames=("oven_type", "temperature_unit"),
)


def record_conversion(oven_type: str, temperature_unit: str) -> None:
    """Count a successful conversion."""
    CONVERSIONS_TOTAL.labels(oven_type=oven_type, temperature_unit=temperature_unit).inc()


def setup_metrics(app: FastAPI, settings: Settings | None = None) -> Instrumentator:
    """Configure Prometheus metrics instrumentation.

    Sets up automatic HTTP request metrics collection including:
    - Request count by method, path, and status code
    - Request duration histogram
    - Request/response size
    - Requests in progress gauge

    Args:
        app: The FastAPI application instance.
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured Instrumentator instance.
    """
    if settings is None:
        settings = get_settings()

    if not settings.observability.metrics.enabled:
        logger.info("Metrics collection disabled")
        return Instrumentator()

    logger.info("Setting up Prometheus metrics")

    prefix = settings.api.v1_prefix
    namespace = settings.observability.metrics.namespace

    instrumentator = Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        should_respect_env_var=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=[
            f"{prefix}/health",
            f"{prefix}/metrics",
            f"{prefix}/openapi.json",
            f"{prefix}/docs",
            f"{prefix}/redoc",
        ],
        env_var_name="METRICS_ENABLED",
        inprogress_name="http_requests_inprogress",
        inprogress_labels=True,
    )

    instrumentator.add(
        metrics.default(
            metric_namespace=namespace,
            metric_subsystem="http",
            should_only_respect_2xx_for_highr=False,
        )
    )

    instrumentator.add(
        metrics.response_size(
            should_include_handler=True,
            should_include_method=True,
            should_include_status=True,
            metric_namespace=namespace,
            metric_subsystem="http",
        )
    )

    instrumentator.instrument(app)

    metrics_endpoint = f"{prefix}/metrics"
    instrumentator.expose(
        app,
        endpoint=metrics_endpoint,
        include_in_schema=True,
        tags=["Monitoring"],
    )

    logger.info("Prometheus metrics configured", endpoint=metrics_endpoint)

    return instrumentator


__all__ = ["CONVERSIONS_TOTAL", "record_conversion", "setup_metrics"]
