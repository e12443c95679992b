"""
Custom exception classes and error handling for Postwoman.

Provides consistent error responses across all API endpoints. The request
executor and the collection codec raise these directly so callers outside
FastAPI get the same taxonomy.
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError


class ErrorResponse(BaseModel):
    """Standard error response format."""
    detail: str
    error_code: str | None = None


def error_responses(*status_codes: int) -> dict[int, dict[str, Any]]:
    """OpenAPI ``responses`` entries documenting the error body for each status."""
    return {code: {"model": ErrorResponse} for code in status_codes}


class APIException(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        detail: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str | None = None
    ):
        self.detail = detail
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(detail)


class ResourceNotFoundError(APIException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(
            detail=f"{resource_type} with id {resource_id} not found",
            status_code=status.HTTP_404_NOT_FOUND,
            error_code="RESOURCE_NOT_FOUND"
        )


class BadRequestError(APIException):
    """Exception raised for invalid request data."""

    def __init__(self, detail: str):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="BAD_REQUEST"
        )


class InvalidURLError(APIException):
    """Exception raised when a request URL cannot be parsed."""

    def __init__(self, url: str, reason: str | None = None):
        self.url = url
        detail = f"Invalid URL: {url!r}"
        if reason:
            detail = f"{detail} ({reason})"
        super().__init__(
            detail=detail,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="INVALID_URL"
        )


class InvalidResponseError(APIException):
    """Exception raised when the server reply is not a usable HTTP response."""

    def __init__(self, detail: str = "Invalid response from server"):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_502_BAD_GATEWAY,
            error_code="INVALID_RESPONSE"
        )


class TransportError(APIException):
    """Exception raised on network-level failures (DNS, connect, TLS, timeout)."""

    def __init__(self, detail: str, timed_out: bool = False):
        self.timed_out = timed_out
        super().__init__(
            detail=detail,
            status_code=(
                status.HTTP_504_GATEWAY_TIMEOUT if timed_out
                else status.HTTP_502_BAD_GATEWAY
            ),
            error_code="TRANSPORT_ERROR"
        )


class ImportDecodeError(APIException):
    """Exception raised when a collection document cannot be decoded."""

    def __init__(self, detail: str):
        super().__init__(
            detail=f"Could not import collection: {detail}",
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="IMPORT_DECODE_ERROR"
        )


class ExportEncodeError(APIException):
    """Exception raised when a folder cannot be encoded for export."""

    def __init__(self, detail: str):
        super().__init__(
            detail=f"Could not export collection: {detail}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code="EXPORT_ENCODE_ERROR"
        )


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Handler for custom API exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "error_code": exc.error_code}
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handler for Pydantic validation errors."""
    errors = exc.errors()
    error_messages = []
    for error in errors:
        loc = " -> ".join(str(part) for part in error["loc"])
        msg = error["msg"]
        error_messages.append(f"{loc}: {msg}")

    detail = "; ".join(error_messages) if error_messages else "Validation error"

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": detail, "error_code": "VALIDATION_ERROR"}
    )


async def sqlalchemy_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Handler for SQLAlchemy database errors."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error occurred", "error_code": "DATABASE_ERROR"}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
