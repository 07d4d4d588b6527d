"""Request tracing and access logging."""

from __future__ import annotations

import re
import time
import uuid
from collections.abc import Awaitable, Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

# Type alias for call_next function
CallNext = Callable[[Request], Awaitable[Response]]

REQUEST_ID_HEADER = "X-Request-ID"

_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._:-]{1,64}$")

# Polled by load balancers, logged at debug level only
QUIET_PATHS = frozenset({"/api/health"})

logger = structlog.get_logger(__name__)


def resolve_request_id(header_value: str | None) -> str:
    """Reuse a well-formed incoming request ID, otherwise generate one."""
    if header_value and _REQUEST_ID_PATTERN.match(header_value):
        return header_value
    return uuid.uuid4().hex


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID that is logged and echoed back."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with its outcome and duration."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)

        if request.url.path in QUIET_PATHS:
            log = logger.debug
        elif response.status_code >= 500:
            log = logger.error
        elif response.status_code >= 400:
            log = logger.warning
        else:
            log = logger.info

        log(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        return response
