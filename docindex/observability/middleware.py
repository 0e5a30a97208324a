"""
FastAPI middleware for observability.

Correlation ID and request logging middleware.

Dependencies: fastapi, starlette, docindex.observability, docindex.api.errors
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from docindex.api.errors import GENERIC_MESSAGE, error_response
from docindex.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses."""

    async def dispatch(self, request: Request, call_next):
        """
        Log HTTP request and response with timing.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response object
        """
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - Exception",
                extra={
                    "method": method,
                    "path": path,
                    "process_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
                    "error_type": type(e).__name__,
                },
            )
            raise

        logger.info(
            f"{method} {path} - {response.status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "process_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
                "client_host": request.client.host if request.client else None,
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Bind the request correlation ID to the context and echo it back.

        Unhandled exceptions become the generic 500 envelope here, inside the
        CORS layer, so error responses carry the same headers as any other.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            try:
                response: Response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"{request.method} {request.url.path} - Unhandled exception",
                    exc_info=e,
                    extra={"path": request.url.path, "error_type": type(e).__name__},
                )
                response = error_response(
                    status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_MESSAGE
                )
            response.headers[CORRELATION_HEADER] = get_correlation_id()
            return response
        finally:
            reset_correlation_id(token)
