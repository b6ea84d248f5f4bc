"""
Hello Server — Header-Stamping ("Say Hi") Middleware
======================================================

What:  Brackets every request/response cycle with a pair of header writes.
How:   Before forwarding, sets `middleware: before` on the request.
       After the inner app returns a response, sets `middleware: after` on it.
Who:   Installed by create_app(); usable on any Starlette/FastAPI app.

Contract:
    1. Request header `middleware` is overwritten with `before`. Any values
       the client sent are replaced; exactly one entry remains.
    2. Control is forwarded to the inner app. Its exceptions propagate
       unchanged and nothing is stamped on that path.
    3. On success the response header `middleware` is overwritten with
       `after`, so stacking the middleware N times still yields one header.

    The middleware holds no state between calls. Status code, body and
    routing are never touched.

Two shapes are provided, matching the two ways Starlette lets you wrap an app:

    SayHiMiddleware       dispatch(request, call_next) on BaseHTTPMiddleware
    SayHiASGIMiddleware   raw ASGI: wraps `send` to stamp http.response.start

Both are added the same way:
    app.add_middleware(SayHiMiddleware)
"""

from starlette.datastructures import MutableHeaders
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

SAY_HI_HEADER = "middleware"
SAY_HI_BEFORE = "before"
SAY_HI_AFTER = "after"


def stamp_before(scope: Scope) -> None:
    """Overwrite the request's `middleware` header in the ASGI scope."""
    scope.setdefault("headers", [])
    # MutableHeaders(scope=...) rebinds scope["headers"] to a fresh list
    MutableHeaders(scope=scope)[SAY_HI_HEADER] = SAY_HI_BEFORE


class SayHiMiddleware(BaseHTTPMiddleware):
    """
    Header stamping as a `dispatch` coroutine.

    `call_next` re-raises whatever the downstream app raised, so the
    post-processing line is only reached when a response exists.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        stamp_before(request.scope)

        response = await call_next(request)

        response.headers[SAY_HI_HEADER] = SAY_HI_AFTER
        return response


class SayHiASGIMiddleware:
    """
    Header stamping as a plain ASGI wrapper around another ASGI app.

    Responses are never buffered: the header is rewritten on the
    `http.response.start` message as it passes through `send`. Lifespan and
    websocket scopes are forwarded untouched.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        scope = dict(scope)
        stamp_before(scope)

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                MutableHeaders(scope=message)[SAY_HI_HEADER] = SAY_HI_AFTER
            await send(message)

        await self.app(scope, receive, send_wrapper)
