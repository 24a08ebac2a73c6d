"""
Exception handlers for the FastAPI application.

Every error leaves the service in one JSON shape:

    {"statusCode", "message", "error", "code", "timestamp", "path"}

plus ``details`` when the error carries any.
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from authcore.application.exceptions import (
    ApplicationError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from authcore.domain.exceptions import DomainException

logger = logging.getLogger(__name__)

# Checked in order; subclasses of UnauthorizedError (invalid credentials,
# locked, disabled, invalid token) all map to 401.
STATUS_BY_ERROR: list[tuple[type[ApplicationError], int]] = [
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BadRequestError, status.HTTP_400_BAD_REQUEST),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def status_for(exc: ApplicationError) -> int:
    for error_class, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(
    request: Request,
    status_code: int,
    message: Any,
    code: str,
    details: Optional[Any] = None,
) -> dict[str, Any]:
    body = {
        "statusCode": status_code,
        "message": message,
        "error": HTTPStatus(status_code).phrase,
        "code": code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": request.url.path,
    }
    if details:
        body["details"] = details
    return body


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """Convert application errors to their HTTP status."""
    status_code = status_for(exc)

    if status_code >= 500:
        logger.error(f"Application error: {exc.error_code} - {exc.message}")
    else:
        logger.warning(f"Application error: {exc.error_code} - {exc.message}")

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content=error_body(request, status_code, exc.message, exc.error_code, exc.details),
        headers=headers,
    )


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Domain rule violations that escaped a use case are client errors."""
    logger.warning(f"Domain exception: {exc.code} - {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(request, status.HTTP_400_BAD_REQUEST, exc.message, exc.code),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Request validation failures are reported as 400 with one message per field."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        errors.append(f"{field}: {error['msg']}" if field else error["msg"])

    logger.warning(f"Validation error: {errors}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(request, status.HTTP_400_BAD_REQUEST, errors, "VALIDATION_ERROR"),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Framework errors (unknown route, wrong method) in the common shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(
            request,
            exc.status_code,
            exc.detail,
            HTTPStatus(exc.status_code).name,
        ),
        headers=getattr(exc, "headers", None),
    )


def build_general_exception_handler(debug: bool):
    """Handler for unexpected exceptions; details are only exposed in debug mode."""

    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unexpected error: {str(exc)}", exc_info=True)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                str(exc) if debug else GENERIC_ERROR_MESSAGE,
                "INTERNAL_ERROR",
            ),
        )

    return general_exception_handler


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, build_general_exception_handler(debug))
