"""
Hello Server — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions raised by route handlers.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) turn them into
       HTTP responses with the right status code.
Who:   Raised by route handlers; caught by the handlers in main.py.

Exception Hierarchy:
    HelloServerError (base)           → 500 Internal Server Error
    ├── RequestFailedError            → 400 Bad Request (plain text body)
    ├── ValidationError               → 400 Bad Request (JSON body)
    └── NotFoundError                 → 404 Not Found (JSON body)

These are converted to responses by FastAPI's exception layer, which runs
inside the middleware stack. Their responses therefore travel back through
every middleware like any other response.
"""

from typing import Any, Dict, Optional


class HelloServerError(Exception):
    """
    Base exception for all Hello Server application errors.

    Attributes:
        message:  Client-facing error description
        context:  Additional debug info (logged, not returned for 5xx)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class RequestFailedError(HelloServerError):
    """
    Raised by a handler that rejects an otherwise well-formed request.

    HTTP:    400 Bad Request, body is the bare message as text/plain.
    When:    POST /try with {"success": false}.
    """

    status_code = 400

    def __init__(
        self,
        message: str = "request failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ValidationError(HelloServerError):
    """
    Raised when client input fails a business rule the extractors can't express.

    HTTP:    400 Bad Request (JSON)
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field



class NotFoundError(HelloServerError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found (JSON)
    When:    Unknown paths and missing static files are answered through
             this exception's handler as well, so every 404 has one shape.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
