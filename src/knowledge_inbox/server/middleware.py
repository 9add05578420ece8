"""Request logging middleware for the HTTP server."""

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Assign each request a short ID and log it with status and timing."""

    async def dispatch(self, request: Request, call_next):
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id
        start_time = time.perf_counter()

        method = request.method
        path = request.url.path
        logger.info("[%s] %s %s - Started", request_id, method, path)

        try:
            response: Response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.exception("[%s] %s %s - Exception (%.0fms)", request_id, method, path, elapsed_ms)
            raise

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "[%s] %s %s - %d (%.0fms)",
            request_id,
            method,
            path,
            response.status_code,
            elapsed_ms,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
