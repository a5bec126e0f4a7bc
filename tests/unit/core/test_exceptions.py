"""Unit tests for custom exceptions and handlers.

Tests cover:
- Exception classes and their error codes
- Mapping of request validation errors onto the error taxonomy
- Registered exception handlers and response bodies
"""

from __future__ import annotations

from typing import Annotated

import pytest
from fastapi import FastAPI, HTTPException, Query
from fastapi.exceptions import RequestValidationError
from starlette.testclient import TestClient

from app.core.exceptions import (
    AppException,
    ErrorDetail,
    ErrorResponse,
    InvalidParameterError,
    MissingParameterError,
    ValidationFailedError,
    setup_exception_handlers,
    translate_validation_error,
)
from app.services.conversion.exceptions import (
    InvalidCombinationError,
    InvalidTokenError,
    TemperatureOutOfRangeError,
)


pytestmark = pytest.mark.unit


# =============================================================================
# Error Models Tests
# =============================================================================


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_defaults_to_unsuccessful(self) -> None:
        """Should always report success as false."""
        response = ErrorResponse(error=ErrorDetail(code="X", message="y"))

        assert response.model_dump() == {
            "success": False,
            "error": {"code": "X", "message": "y", "field": None},
        }


# =============================================================================
# Exception Classes Tests
# =============================================================================


class TestExceptionClasses:
    """Tests for the AppException hierarchy."""

    def test_missing_parameter(self) -> None:
        """Should build the missing parameter error."""
        exc = MissingParameterError("duration")

        assert exc.status_code == 400
        assert exc.code == "MISSING_PARAMETER"
        assert exc.message == "Required parameter 'duration' is missing"
        assert exc.field == "duration"

    def test_invalid_parameter(self) -> None:
        """Should build the invalid parameter error."""
        exc = InvalidParameterError("bad", field="oven_type")

        assert exc.status_code == 400
        assert exc.code == "INVALID_PARAMETER"
        assert exc.field == "oven_type"

    def test_type_mismatch(self) -> None:
        """Should describe the raw value and the expected type."""
        exc = InvalidParameterError.type_mismatch("temperature", "hot", "float")

        assert exc.message == (
            "Invalid value 'hot' for parameter 'temperature'. Expected type: float"
        )
        assert exc.field == "temperature"

    def test_validation_failed(self) -> None:
        """Should build the validation error."""
        exc = ValidationFailedError("Duration must be at least 1 minute", "duration")

        assert exc.status_code == 400
        assert exc.code == "VALIDATION_ERROR"

    def test_to_response(self) -> None:
        """Should convert to the error response body."""
        body = MissingParameterError("oven_type").to_response()

        assert body.success is False
        assert body.error.code == "MISSING_PARAMETER"
        assert body.error.field == "oven_type"

    def test_is_exception(self) -> None:
        """All application errors should share the base class."""
        assert isinstance(ValidationFailedError("x"), AppException)


# =============================================================================
# Validation Error Translation Tests
# =============================================================================


class TestTranslateValidationError:
    """Tests for translate_validation_error."""

    def test_missing(self) -> None:
        """Missing query values become MISSING_PARAMETER."""
        exc = RequestValidationError(
            [{"type": "missing", "loc": ("query", "duration"), "msg": "Field required"}]
        )

        result = translate_validation_error(exc)

        assert isinstance(result, MissingParameterError)
        assert result.field == "duration"

    @pytest.mark.parametrize(
        ("error_type", "expected_type"),
        [
            ("float_parsing", "float"),
            ("finite_number", "float"),
            ("int_parsing", "int"),
            ("int_from_float", "int"),
        ],
    )
    def test_parse_errors(self, error_type: str, expected_type: str) -> None:
        """Unparsable values become INVALID_PARAMETER."""
        exc = RequestValidationError(
            [
                {
                    "type": error_type,
                    "loc": ("query", "duration"),
                    "msg": "Input should be valid",
                    "input": "abc",
                }
            ]
        )

        result = translate_validation_error(exc)

        assert isinstance(result, InvalidParameterError)
        assert result.message == (
            f"Invalid value 'abc' for parameter 'duration'. "
            f"Expected type: {expected_type}"
        )

    def test_uses_first_error(self) -> None:
        """Only the first error is reported."""
        exc = RequestValidationError(
            [
                {"type": "missing", "loc": ("query", "temperature"), "msg": "x"},
                {"type": "missing", "loc": ("query", "duration"), "msg": "x"},
            ]
        )

        assert translate_validation_error(exc).field == "temperature"

    def test_upper_bound(self) -> None:
        """Values past an upper bound are reported as a type mismatch."""
        exc = RequestValidationError(
            [
                {
                    "type": "less_than_equal",
                    "loc": ("query", "duration"),
                    "msg": "Input should be less than or equal to 2147483647",
                    "input": "2147483648",
                    "ctx": {"le": 2147483647},
                }
            ]
        )

        result = translate_validation_error(exc)

        assert isinstance(result, InvalidParameterError)
        assert result.field == "duration"
        assert result.message == (
            "Invalid value '2147483648' for parameter 'duration'. Expected type: int"
        )

    def test_other_errors(self) -> None:
        """Anything else becomes VALIDATION_ERROR."""
        exc = RequestValidationError(
            [
                {
                    "type": "string_too_long",
                    "loc": ("query", "oven_type"),
                    "msg": "String should have at most 20 characters",
                }
            ]
        )

        result = translate_validation_error(exc)

        assert isinstance(result, ValidationFailedError)
        assert result.field == "oven_type"

    def test_no_errors(self) -> None:
        """An empty error list still yields a validation error."""
        result = translate_validation_error(RequestValidationError([]))

        assert result.code == "VALIDATION_ERROR"


# =============================================================================
# Exception Handlers Tests
# =============================================================================


@pytest.fixture
def client() -> TestClient:
    """App with the exception handlers and routes that raise each error."""
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/app-error")
    async def app_error() -> None:
        raise ValidationFailedError("Duration must be at least 1 minute", "duration")

    @app.get("/token-error")
    async def token_error() -> None:
        raise InvalidTokenError("oven_type", "grill", ["CONVENTIONAL", "FAN", "GAS"])

    @app.get("/combination-error")
    async def combination_error() -> None:
        raise InvalidCombinationError

    @app.get("/range-error")
    async def range_error() -> None:
        raise TemperatureOutOfRangeError(1e308)

    @app.get("/http-error")
    async def http_error() -> None:
        raise HTTPException(status_code=404, detail="Not here")

    @app.get("/crash")
    async def crash() -> None:
        msg = "boom"
        raise RuntimeError(msg)

    @app.get("/typed")
    async def typed(duration: Annotated[int, Query(le=2**31 - 1)]) -> dict[str, int]:
        return {"duration": duration}

    return TestClient(app, raise_server_exceptions=False)


class TestExceptionHandlers:
    """Tests for the registered exception handlers."""

    def test_app_exception(self, client: TestClient) -> None:
        """Should render AppException with its code and field."""
        response = client.get("/app-error")

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Duration must be at least 1 minute",
                "field": "duration",
            },
        }

    def test_conversion_token_error(self, client: TestClient) -> None:
        """Should render domain token errors as INVALID_PARAMETER."""
        response = client.get("/token-error")

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_PARAMETER"
        assert error["message"] == (
            "Invalid oven_type: grill. Must be one of: CONVENTIONAL, FAN, GAS"
        )
        assert error["field"] == "oven_type"

    def test_conversion_combination_error(self, client: TestClient) -> None:
        """Should render the combination rule without a field."""
        response = client.get("/combination-error")

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_PARAMETER"
        assert error["field"] is None

    def test_http_exception(self, client: TestClient) -> None:
        """Should keep the status code of HTTP exceptions."""
        response = client.get("/http-error")

        assert response.status_code == 404
        assert response.json()["error"] == {
            "code": "HTTP_ERROR",
            "message": "Not here",
            "field": None,
        }

    def test_unhandled_exception(self, client: TestClient) -> None:
        """Should hide unexpected errors behind INTERNAL_ERROR."""
        response = client.get("/crash")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "field": None,
            },
        }

    def test_missing_query_parameter(self, client: TestClient) -> None:
        """Should render missing query parameters as 400."""
        response = client.get("/typed")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MISSING_PARAMETER"

    def test_unparsable_query_parameter(self, client: TestClient) -> None:
        """Should render unparsable values as 400 INVALID_PARAMETER."""
        response = client.get("/typed", params={"duration": "abc"})

        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "INVALID_PARAMETER",
            "message": "Invalid value 'abc' for parameter 'duration'. Expected type: int",
            "field": "duration",
        }

    def test_query_parameter_above_bound(self, client: TestClient) -> None:
        """Should render values past the upper bound as INVALID_PARAMETER."""
        response = client.get("/typed", params={"duration": "1" + "0" * 400})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_PARAMETER"
        assert error["field"] == "duration"
        assert error["message"].endswith("Expected type: int")

    def test_temperature_out_of_range(self, client: TestClient) -> None:
        """Should render out of range temperatures as INVALID_PARAMETER."""
        response = client.get("/range-error")

        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "INVALID_PARAMETER",
            "message": "Temperature 1e+308 is out of range for conversion",
            "field": "temperature",
        }
