"""
Hello Server — Middleware Package
===================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Access Log] → [Say Hi] → [CORS] → Route Handler

    Responses unwind in reverse, so the say-hi `after` stamp is already on
    the response when the access log and request ID layers see it.
"""

from hello_server.middleware.say_hi import (
    SAY_HI_AFTER,
    SAY_HI_BEFORE,
    SAY_HI_HEADER,
    SayHiASGIMiddleware,
    SayHiMiddleware,
)

__all__ = [
    "SAY_HI_AFTER",
    "SAY_HI_BEFORE",
    "SAY_HI_HEADER",
    "SayHiASGIMiddleware",
    "SayHiMiddleware",
]
