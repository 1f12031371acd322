"""
API error handling and exception mapping.

Domain errors are converted into ``ErrorResponse`` payloads. Raw generator
output is never echoed back to the client.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from presi.api.schemas.base import ErrorResponse
from presi.domain_core.exceptions import DomainError
from presi.infra.config.logging_config import get_logger

logger = get_logger("api.errors")

STATUS_BY_CODE = {
    "STRUCTURE_NOT_FOUND": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "NO_VALID_SLIDES": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_SHAPE": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "MALFORMED_PAYLOAD": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_AUDIO_FORMAT": status.HTTP_400_BAD_REQUEST,
}


def _error_response(status_code: int, error: str, detail: str) -> JSONResponse:
    payload = ErrorResponse(error=error, detail=detail)
    return JSONResponse(status_code=status_code, content=payload.model_dump(mode="json"))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """
    Handle domain-specific errors.

    Args:
        request: The HTTP request
        exc: The domain error

    Returns:
        JSONResponse: Formatted error response
    """
    logger.warning("domain.error", code=exc.code, error=exc.message)
    status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return _error_response(status_code, exc.code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors."""
    formatted_errors = [
        f"{' -> '.join(str(loc) for loc in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    logger.warning("request.validation_failed", errors=formatted_errors)
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Validation failed: " + "; ".join(formatted_errors),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    logger.warning("http.exception", status_code=exc.status_code, detail=exc.detail)
    return _error_response(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unexpected.error", error_type=type(exc).__name__)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred. Please try again later.",
    )


def setup_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
