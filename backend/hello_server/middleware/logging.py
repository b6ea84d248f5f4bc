"""
Hello Server — Access Logging Middleware
==========================================

What:  One log line per HTTP request: method, path, status, duration, request ID.
How:   Times the downstream call with perf_counter and picks the log level
       from the status class (5xx ERROR, 4xx WARNING, else INFO).
When:  Runs inside RequestIDMiddleware so the request ID is already set.

Request bodies and headers are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hello_server.middleware.request_id import request_id_var

logger = logging.getLogger("hello_server.access")

# Liveness probes would otherwise dominate the access log
QUIET_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each completed request on the `hello_server.access` logger."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        rid = request_id_var.get()
        client_ip = request.client.host if request.client else "unknown"
        status = response.status_code

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
