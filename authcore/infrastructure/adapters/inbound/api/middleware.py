"""
Custom middleware for the FastAPI application.

Provides:
- Request ID generation and tracking (also feeds log correlation ids)
- Security headers
- Request/response logging
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from authcore.infrastructure.logging import request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware to generate and track request IDs.

    - Reuses a well-formed incoming X-Request-ID, otherwise generates a UUID4
    - Stores it in request.state.request_id and in the logging context
    - Adds X-Request-ID header to responses
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        incoming = request.headers.get(REQUEST_ID_HEADER, "")
        request_id = incoming if _is_uuid(incoming) else str(uuid.uuid4())

        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add security headers to all responses.

    Headers added:
    - X-Content-Type-Options: nosniff
    - X-Frame-Options: DENY
    - Referrer-Policy: strict-origin-when-cross-origin
    - Cache-Control: no-store (responses may carry tokens)
    - Strict-Transport-Security (production only)
    """

    def __init__(self, app: ASGIApp, enable_hsts: bool = False):
        """
        Initialize SecurityHeadersMiddleware.

        Args:
            app: ASGI application
            enable_hsts: Enable Strict-Transport-Security header (production only)
        """
        super().__init__(app)
        self.enable_hsts = enable_hsts

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"

        if self.enable_hsts:
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )

        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log all incoming requests and outgoing responses.

    Log levels:
    - INFO: Successful requests (2xx, 3xx)
    - WARNING: Client errors (4xx)
    - ERROR: Server errors (5xx)
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        method = request.method
        path = request.url.path
        client_host = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            logger.error(
                f"Request failed: {method} {path} - "
                f"client={client_host} duration={duration:.3f}s error={str(e)}",
                exc_info=True,
            )
            raise

        duration = time.time() - start_time
        status_code = response.status_code
        log_message = (
            f"{method} {path} {status_code} - "
            f"client={client_host} duration={duration:.3f}s"
        )

        if status_code < 400:
            logger.info(log_message)
        elif status_code < 500:
            logger.warning(log_message)
        else:
            logger.error(log_message)

        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        return response


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True
