"""
Hello Server — Request ID Middleware
======================================

What:  Tags each request with a short correlation ID and echoes it back.
How:   Reuses a client-sent X-Request-ID, otherwise generates one; stores it
       in a ContextVar (for loggers and exception handlers) and on
       request.state (for route handlers); adds it to the response headers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    """First 8 hex chars of a uuid4; enough to correlate log lines."""
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns `request.state.request_id` and sets the X-Request-ID response header."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()

        # Not reset afterwards: the catch-all 500 handler runs outside this
        # middleware and still reads it
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
