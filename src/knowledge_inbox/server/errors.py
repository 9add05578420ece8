"""Exception handlers mapping Knowledge Inbox errors to HTTP responses.

Every error response has the body ``{"error": {"message", "requestId"}}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from knowledge_inbox.exceptions import (
    FetchError,
    InboxError,
    NotFoundError,
    ProviderError,
    ValidationError,
)
from knowledge_inbox.server.middleware import get_request_id

logger = logging.getLogger(__name__)

# Most specific first; lookups follow the exception's MRO
STATUS_CODES: dict[type[Exception], int] = {
    ValidationError: 400,
    NotFoundError: 404,
    ProviderError: 502,
    FetchError: 502,
    InboxError: 500,
}


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "requestId": get_request_id(request)}},
    )


async def inbox_error_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code = next(
        (code for cls, code in STATUS_CODES.items() if isinstance(exc, cls)),
        500,
    )
    if status_code >= 500:
        logger.error("[%s] %s: %s", get_request_id(request), type(exc).__name__, exc)
    return error_response(request, status_code, str(exc) or "Internal server error")


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are reported like any other bad input."""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return error_response(request, 400, f"Invalid request body: {message}")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return error_response(request, exc.status_code, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("[%s] Unhandled error", get_request_id(request), exc_info=exc)
    return error_response(request, 500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    for exc_class in STATUS_CODES:
        app.add_exception_handler(exc_class, inbox_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
