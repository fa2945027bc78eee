"""Unified error handling for API endpoints."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from runtimeinfo.api.models import ErrorResponse
from runtimeinfo.utils.exceptions import (
    ConfigurationError,
    DetectionCancelledError,
    RuntimeInfoError,
)
from runtimeinfo.utils.logging_config import get_logger

logger = get_logger(__name__)


# Mapping of exceptions to HTTP status codes and error codes
EXCEPTION_HANDLERS: dict[type[Exception], tuple[int, str]] = {
    ConfigurationError: (500, "CONFIGURATION_ERROR"),
    DetectionCancelledError: (503, "DETECTION_CANCELLED"),
}


def get_error_info(exc: Exception) -> tuple[int, str]:
    """Get the HTTP status code and error code for an exception."""
    for exc_type, info in EXCEPTION_HANDLERS.items():
        if isinstance(exc, exc_type):
            return info
    return 500, "INTERNAL_ERROR"


def create_error_response(exc: Exception) -> JSONResponse:
    """Create a standardized error response for an exception."""
    status_code, code = get_error_info(exc)
    error_data = ErrorResponse(error=str(exc), code=code)
    return JSONResponse(
        content=error_data.model_dump(),
        status_code=status_code,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI app."""

    @app.exception_handler(RuntimeInfoError)
    async def runtimeinfo_exception_handler(request: Request, exc: RuntimeInfoError):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return create_error_response(exc)
