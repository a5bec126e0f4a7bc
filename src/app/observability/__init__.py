"""Logging, metrics and tracing setup for the conversion service."""

from app.observability.logging import get_logger, setup_logging
from app.observability.metrics import setup_metrics
from app.observability.tracing import setup_tracing, shutdown_tracing


__all__ = [
    "get_logger",
    "setup_logging",
    "setup_metrics",
    "setup_tracing",
    "shutdown_tracing",
]
