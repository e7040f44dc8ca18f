"""FastAPI exception handlers for service exceptions."""

from __future__ import annotations

from fastapi import Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from core.exceptions import (
    AlreadyExistsError,
    BadRequestError,
    GcsMockError,
    NotFoundError,
)
from services.api.schemas import ErrorBody, ErrorResponse


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=ErrorBody(code=status_code, message=message)).model_dump(),
    )


async def gcs_mock_exception_handler(request: Request, exc: GcsMockError) -> JSONResponse:
    """Map service exceptions to GCS-style error responses."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = exc.message

    if isinstance(exc, BadRequestError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
        # Missing bucket and missing object are indistinguishable to clients.
        message = "Not Found"
    elif isinstance(exc, AlreadyExistsError):
        status_code = status.HTTP_409_CONFLICT

    logger.warning(
        "{method} {path} -> {status}: {type} - {message}",
        method=request.method,
        path=request.url.path,
        status=status_code,
        type=type(exc).__name__,
        message=exc.message,
    )

    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        message = "Internal Server Error"
    return _error_response(status_code, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(
        "Unhandled exception on {method} {path}",
        method=request.method,
        path=request.url.path,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


__all__ = ["gcs_mock_exception_handler", "unhandled_exception_handler"]
