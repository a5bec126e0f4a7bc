"""Custom exceptions and exception handlers.

This module provides structured exception handling with:
- Custom exception classes for the API error taxonomy
- FastAPI exception handlers for consistent error responses
- Structured error response models

Every error response has the shape::

    {"success": false, "error": {"code": ..., "message": ..., "field": ...}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.observability.logging import get_logger
from app.services.conversion.exceptions import ConversionError


if TYPE_CHECKING:
    from fastapi import Request

logger = get_logger(__name__)

MISSING_PARAMETER = "MISSING_PARAMETER"
INVALID_PARAMETER = "INVALID_PARAMETER"
VALIDATION_ERROR = "VALIDATION_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"
HTTP_ERROR = "HTTP_ERROR"

# Pydantic error types produced when a query value cannot be parsed
_PARSE_ERROR_TYPES: dict[str, str] = {
    "float_parsing": "float",
    "float_type": "float",
    "finite_number": "float",
    "int_parsing": "int",
    "int_type": "int",
    "int_from_float": "int",
}


class ErrorDetail(BaseModel):
    """Structured error detail."""

    code: str
    message: str
    field: str | None = None


class ErrorResponse(BaseModel):
    """Structured error response."""

    success: bool = False
    error: ErrorDetail


class AppException(Exception):
    """Base application exception.

    All custom exceptions should inherit from this class
    for consistent error handling.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        field: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        self.field = field
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Build the error response body for this exception."""
        return ErrorResponse(
            error=ErrorDetail(code=self.code, message=self.message, field=self.field)
        )


class MissingParameterError(AppException):
    """A required query parameter was not supplied."""

    def __init__(self, parameter: str) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            code=MISSING_PARAMETER,
            message=f"Required parameter '{parameter}' is missing",
            field=parameter,
        )


class InvalidParameterError(AppException):
    """A parameter could not be parsed or is not allowed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            code=INVALID_PARAMETER,
            message=message,
            field=field,
        )

    @classmethod
    def type_mismatch(
        cls, parameter: str, value: Any, expected_type: str
    ) -> InvalidParameterError:
        """Create the error for a value that does not parse as the expected type."""
        return cls(
            f"Invalid value '{value}' for parameter '{parameter}'. "
            f"Expected type: {expected_type}",
            field=parameter,
        )


class ValidationFailedError(AppException):
    """A parameter parsed correctly but violates a constraint."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            code=VALIDATION_ERROR,
            message=message,
            field=field,
        )


def _error_response(exc: AppException) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(),
    )


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state."""
    return getattr(request.state, "request_id", None)


def translate_validation_error(exc: RequestValidationError) -> AppException:
    """Map the first FastAPI validation error onto the API error taxonomy.

    Missing query parameters become MISSING_PARAMETER, values that fail to
    parse or exceed an upper bound become INVALID_PARAMETER, anything else
    VALIDATION_ERROR.
    """
    errors = exc.errors()
    if not errors:
        return ValidationFailedError("Request validation failed")

    error = errors[0]
    loc = error.get("loc", ())
    parameter = str(loc[-1]) if loc else None
    error_type = error.get("type", "")

    if parameter is not None and error_type == "missing":
        return MissingParameterError(parameter)

    if parameter is not None and error_type in _PARSE_ERROR_TYPES:
        return InvalidParameterError.type_mismatch(
            parameter, error.get("input"), _PARSE_ERROR_TYPES[error_type]
        )

    # Values past an upper bound do not fit the parameter's type
    upper_bound = error.get("ctx", {}).get("le")
    if (
        parameter is not None
        and error_type == "less_than_equal"
        and upper_bound is not None
    ):
        return InvalidParameterError.type_mismatch(
            parameter, error.get("input"), type(upper_bound).__name__
        )

    return ValidationFailedError(str(error.get("msg", "Validation failed")), parameter)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException,
    ) -> ORJSONResponse:
        """Handle custom application exceptions."""
        logger.info(
            "Request rejected",
            code=exc.code,
            field=exc.field,
            request_id=_get_request_id(request),
        )
        return _error_response(exc)

    @app.exception_handler(ConversionError)
    async def conversion_exception_handler(
        request: Request,
        exc: ConversionError,
    ) -> ORJSONResponse:
        """Handle domain errors raised by the conversion service."""
        logger.info(
            "Conversion rejected",
            error=type(exc).__name__,
            request_id=_get_request_id(request),
        )
        return _error_response(InvalidParameterError(exc.message, field=exc.field))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> ORJSONResponse:
        """Handle Starlette HTTP exceptions."""
        return ORJSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=ErrorDetail(code=HTTP_ERROR, message=str(exc.detail)),
            ).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> ORJSONResponse:
        """Handle request parameter binding errors."""
        return await app_exception_handler(request, translate_validation_error(exc))

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        """Handle unexpected exceptions."""
        logger.opt(exception=exc).error(
            "Unhandled exception", request_id=_get_request_id(request)
        )

        return ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                error=ErrorDetail(
                    code=INTERNAL_ERROR,
                    message="An unexpected error occurred",
                ),
            ).model_dump(),
        )
