"""
Request Logging Middleware

One structured access-log line per request:

    Request handled  method=GET path=/users/1 status=200 duration_ms=4.2 request_id=...

A request_id is bound into the log context for the duration of the
request, so every log line emitted while handling it carries the same id.
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from neweats.shared.core.logging import clear_log_context, log_context, logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        clear_log_context()
        log_context(request_id=str(uuid.uuid4()))
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.info(
                "Request failed",
                method=request.method,
                path=request.url.path,
                status=500,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            raise

        logger.info(
            "Request handled",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return response
