"""
Maps domain errors and request validation failures to HTTP responses.

Every error body has the ErrorResponse shape. Internal failures are logged
with their traceback and answered with a generic message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import (
    DuplicateResourceError,
    EmployeeRecordsError,
    InternalServerError,
    ResourceNotFoundError,
    ValidationError,
)
from app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"

_REQUEST_SECTIONS = {"body", "query", "path", "header"}


def _error_response(status_code: int, error_code: str, message: str) -> JSONResponse:
    body = ErrorResponse(error_code=error_code, message=message)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )


def format_validation_errors(exc: RequestValidationError) -> str:
    """One comma-joined message covering every failed field."""
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part not in _REQUEST_SECTIONS)
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return ", ".join(messages)


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(_request: Request, exc: RequestValidationError) -> JSONResponse:
        message = format_validation_errors(exc)
        logger.warning("Validation error: %s", message)
        return _error_response(status.HTTP_400_BAD_REQUEST, ValidationError.error_code, message)

    @app.exception_handler(ValidationError)
    async def handle_validation(_request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning("Validation error: %s", exc.message)
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.error_code, exc.message)

    @app.exception_handler(DuplicateResourceError)
    async def handle_duplicate(_request: Request, exc: DuplicateResourceError) -> JSONResponse:
        logger.warning("Duplicate resource: %s", exc.message)
        return _error_response(status.HTTP_409_CONFLICT, exc.error_code, exc.message)

    @app.exception_handler(ResourceNotFoundError)
    async def handle_not_found(_request: Request, exc: ResourceNotFoundError) -> JSONResponse:
        logger.warning("Resource not found: %s", exc.message)
        return _error_response(status.HTTP_404_NOT_FOUND, exc.error_code, exc.message)

    # InternalServerError and any other domain error nobody mapped above
    @app.exception_handler(EmployeeRecordsError)
    async def handle_internal(_request: Request, exc: EmployeeRecordsError) -> JSONResponse:
        logger.error("Internal error: %s", exc.message, exc_info=exc)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, InternalServerError.error_code, INTERNAL_ERROR_MESSAGE
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unexpected error: %s", type(exc).__name__, exc_info=exc)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, InternalServerError.error_code, INTERNAL_ERROR_MESSAGE
        )
