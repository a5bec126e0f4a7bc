"""Pydantic schemas for request/response validation.

This module exports all schema classes for the Air Fryer Conversion API.
"""

from app.schemas.base import APIResponse
from app.schemas.conversion import (
    ConversionData,
    ConversionInput,
    ConversionResponse,
)
from app.schemas.health import HealthResponse
from app.schemas.info import InfoResponse
from app.schemas.root import RootResponse


__all__ = [
    "APIResponse",
    "ConversionData",
    "ConversionInput",
    "ConversionResponse",
    "HealthResponse",
    "InfoResponse",
    "RootResponse",
]
