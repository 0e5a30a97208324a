"""
API error handling.

Maps the domain exception hierarchy to HTTP status codes and the uniform
{"success": false, "error": ...} envelope. Upstream failures are reported
with a generic per-route message; provider detail stays in the logs.

Dependencies: fastapi, starlette, docindex.core.exceptions
System role: Exception to HTTP response translation
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from docindex.core.exceptions import (
    DocIndexException,
    ForbiddenError,
    InvalidArgumentError,
    UnauthorizedError,
    UpstreamError,
)
from docindex.models.common import ErrorResponse

logger = logging.getLogger(__name__)

STATUS_BY_EXCEPTION: dict[type[DocIndexException], int] = {
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    UpstreamError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

UPSTREAM_MESSAGES = {
    "/store": "An error occurred while storing the text",
    "/search": "An error occurred while searching",
    "/delete": "An error occurred while deleting the document",
}
GENERIC_MESSAGE = "An internal error occurred"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the error envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def _status_for(exc: DocIndexException) -> int:
    for exc_type in type(exc).__mro__:
        if exc_type in STATUS_BY_EXCEPTION:
            return STATUS_BY_EXCEPTION[exc_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_doc_index_exception(request: Request, exc: DocIndexException) -> JSONResponse:
    status_code = _status_for(exc)
    if status_code >= 500:
        logger.error(
            "Request failed with upstream error",
            extra={"path": request.url.path, "error": str(exc)},
        )
        message = UPSTREAM_MESSAGES.get(request.url.path, GENERIC_MESSAGE)
        return error_response(status_code, message)

    logger.warning(
        "Request rejected",
        extra={"path": request.url.path, "status_code": status_code, "error": exc.message},
    )
    return error_response(status_code, exc.message)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.warning(
        "Invalid request body",
        extra={"path": request.url.path, "error_count": len(errors)},
    )
    message = "Invalid request body"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request body: {field or 'body'}: {first.get('msg', 'invalid value')}"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unexpected failure",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on the app."""
    app.add_exception_handler(DocIndexException, handle_doc_index_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_exception)
