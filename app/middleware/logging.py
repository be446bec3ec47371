"""Logging middleware for request tracking."""
import time
import uuid
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging_config import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _loggable_path(request: Request) -> str:
    # Scan URLs carry the member token, which is a bearer credential
    path = request.url.path
    if path.startswith("/api/v1/scan/"):
        rest = path[len("/api/v1/scan/"):]
        token, _, tail = rest.partition("/")
        masked = token[:6] + "..." if token else token
        return "/api/v1/scan/" + masked + ("/" + tail if tail else "")
    return path


class LoggingMiddleware(BaseHTTPMiddleware):
    """Bind a request id to every log line and log each request's outcome."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Reuse the proxy's request id when there is one
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=_loggable_path(request),
            client_host=request.client.host if request.client else None,
        )

        start = time.perf_counter()
        logger.info("request_started")

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "request_failed",
                exception=str(exc),
                exception_type=type(exc).__name__,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response
