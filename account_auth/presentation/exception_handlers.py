"""Exception handlers for converting exceptions to HTTP responses.

Every ApplicationError and DomainException carries an error_code; one
handler per base class turns it into a status via ERROR_CODE_TO_HTTP_STATUS.

Responses only ever contain the exception's message and code. Request
bodies (which hold passwords) are never echoed back or logged.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from account_auth.application.exceptions import ApplicationError
from account_auth.domain.exceptions import DomainException
from account_auth.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)


def _coded_error_response(message: str, error_code: str) -> JSONResponse:
    return JSONResponse(
        status_code=get_http_status_for_error_code(error_code),
        content={
            "detail": message,
            "error_code": error_code,
        },
    )


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """
    Handle ALL application layer exceptions.

    AccountNotFoundError and InvalidCredentialsError share message and
    error_code, so they render to identical 401 responses.
    """
    return _coded_error_response(exc.message, exc.error_code)


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """Handle ALL domain layer exceptions that escaped the services."""
    if exc.error_code == "STORAGE_ERROR":
        logger.error(f"Storage failure on {request.url.path}: {exc.message}")
    return _coded_error_response(exc.message, exc.error_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors from request data.

    Only the field location and message are reported; pydantic's "input"
    entry is dropped because it may contain a password.
    """
    validation_errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation failed",
            "error_code": "VALIDATION_ERROR",
            "errors": validation_errors,
        },
    )


async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """
    Handle database errors not already translated by the repositories.

    The exception type is logged, not its message: driver messages can
    include bound parameters such as salts and hashes.
    """
    logger.error(f"Database error on {request.url.path}: {type(exc).__name__}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal database error occurred",
            "error_code": "DATABASE_ERROR",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other unhandled exceptions."""
    logger.error(f"Unhandled error on {request.url.path}: {type(exc).__name__}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal server error occurred",
            "error_code": "INTERNAL_SERVER_ERROR",
        },
    )
