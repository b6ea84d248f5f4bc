"""
Hello Server — FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn hello_server.main:app), the CLI and tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌────────┐ ┌──────────┐  │
    │  │  Req ID  │→│ Logging  │→│ Say Hi │→│  CORS    │  │
    │  └──────────┘ └──────────┘ └────────┘ └──────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  /hello/{name}  /count  /record/create  /try        │
    │  /query  /health  /static/*                         │
    │                                                     │
    │  Exception Handlers:                                │
    │  RequestFailed→400 text │ Validation→400            │
    │  NotFound→404 │ HelloServerError→status │ *→500   │
    └─────────────────────────────────────────────────────┘

Error pathway:
    Handlers for the HelloServerError family run in FastAPI's exception
    layer, inside the middleware chain. Their responses pass back through
    Say Hi and are stamped `middleware: after` like any other response.
    The catch-all Exception handler is installed on Starlette's outermost
    server-error layer instead, so a 500 from an unhandled exception never
    passes through Say Hi and carries no stamp.
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_server import __version__
from hello_server.config import Settings, settings as default_settings
from hello_server.exceptions import (
    HelloServerError,
    NotFoundError,
    RequestFailedError,
    ValidationError,
)
from hello_server.middleware.logging import RequestLoggingMiddleware
from hello_server.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)
from hello_server.middleware.say_hi import SayHiASGIMiddleware, SayHiMiddleware
from hello_server.routes import health, hello, query, records
from hello_server.schemas.api import ErrorResponse
from hello_server.state import RequestCounter

logger = logging.getLogger(__name__)

SAY_HI_STYLES = {
    "dispatch": SayHiMiddleware,
    "asgi": SayHiASGIMiddleware,
}


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure the root logger once, at startup.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    # hello_server.access already records every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, make sure the static directory exists.
    Shutdown: log the final counter value.
    """
    config: Settings = app.state.settings
    setup_logging(config.log_level)

    static_root = Path(config.static_root)
    static_root.mkdir(parents=True, exist_ok=True)

    logger.info("Hello Server %s starting up", __version__)
    logger.info("Serving static files from %s at %s", static_root.resolve(), config.static_url_path)
    logger.info("Say-hi middleware style: %s", config.middleware_style)
    logger.info("Listening on http://%s:%d", config.backend_host, config.backend_port)

    yield

    logger.info("Shutting down after %d counted requests", app.state.counter.value)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_body(error: str, message: str, rid: str, details: Optional[dict] = None) -> dict:
    """Serialize the shared JSON error shape (ErrorResponse)."""
    return ErrorResponse(
        error=error,
        message=message,
        details=details or {},
        request_id=rid,
    ).model_dump()


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP responses.

    Handler hierarchy:
        RequestFailedError   → 400 text/plain, body is the bare message
        ValidationError      → 400 JSON
        NotFoundError        → 404 JSON (also unknown paths and missing static files)
        HelloServerError     → exc.status_code, JSON
        Exception (fallback) → 500 JSON, details only in the server log
    """

    @app.exception_handler(RequestFailedError)
    async def handle_request_failed(request: Request, exc: RequestFailedError):
        rid = request_id_var.get()
        logger.info("[%s] Request rejected: %s", rid, exc.message)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get()
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body("validation_error", exc.message, rid, exc.context),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get()
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body("not_found", exc.message, rid, exc.context),
        )

    @app.exception_handler(404)
    async def handle_unknown_path(request: Request, exc: StarletteHTTPException):
        """Router and StaticFiles misses answer in the same shape as NotFoundError."""
        return await handle_not_found(
            request, NotFoundError(resource="path", resource_id=request.url.path)
        )

    @app.exception_handler(HelloServerError)
    async def handle_app_error(request: Request, exc: HelloServerError):
        rid = request_id_var.get()
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body("server_error", exc.message, rid),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for unexpected errors.

        Runs outside every user middleware, after the exception has
        propagated through them. RequestIDMiddleware leaves request_id_var
        set, so the generated ID is still available here. The stack trace
        is logged, not returned.
        """
        rid = request_id_var.get()
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        headers = {REQUEST_ID_HEADER: rid} if rid else None
        return JSONResponse(
            status_code=500,
            content=error_body(
                "internal_server_error", "An unexpected error occurred.", rid
            ),
            headers=headers,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to build with; the module-level singleton if omitted.

    Every call returns an independent app with its own request counter.
    """
    config = config or default_settings

    app = FastAPI(
        title="Hello Server",
        description="Tutorial service: routing, extraction, shared state and middleware.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.counter = RequestCounter()
    app.state.started_at = time.monotonic()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = outermost. Execution order on the way in:
    # RequestID → Logging → SayHi → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "middleware"],
    )
    app.add_middleware(SAY_HI_STYLES[config.middleware_style])
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(hello.router)
    app.include_router(records.router)
    app.include_router(query.router)
    app.include_router(health.router)

    # The directory may not exist yet at import time; lifespan creates it
    # before the first request is served
    app.mount(
        config.static_url_path,
        StaticFiles(directory=config.static_root, html=True, check_dir=False),
        name="static",
    )

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `hello_server.main:app` to be importable
app = create_app()
