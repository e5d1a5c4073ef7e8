"""
HelloUsers Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Served by uvicorn (`hellousers.main:app`), either through
       `python -m hellousers` or directly.

Application Architecture:
    ┌──────────────────────────────────────────────┐
    │                 FastAPI App                  │
    │                                              │
    │  Middleware Chain:                           │
    │  ┌──────────┐ ┌─────────────┐                │
    │  │ Req ID   │→│  Logging    │                │
    │  └──────────┘ └─────────────┘                │
    │                                              │
    │  Routes:                                     │
    │  GET /   GET /users   GET /users/{id}        │
    │  POST /users                                 │
    │                                              │
    │  Exception Handlers:                         │
    │  RequestValidationError→422 │ Exception→500  │
    └──────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hellousers import __version__
from hellousers.config import settings
from hellousers.middleware.logging import RequestLoggingMiddleware
from hellousers.middleware.request_id import RequestIDMiddleware, request_id_var
from hellousers.routes import root, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s

    Records go to stderr; stdout carries only the startup line printed by
    `python -m hellousers`. uvicorn's own access logger is quieted because
    RequestLoggingMiddleware already writes one line per request.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging. Shutdown: log it.

    There are no resources to open or release; the service is stateless.
    """
    setup_logging()
    logger.debug("HelloUsers %s listening on %s:%d", __version__, settings.host, settings.port)

    yield

    logger.info("HelloUsers shutting down")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler table:
        RequestValidationError → 422, FastAPI's default body (logged first)
        Exception (fallback)   → 500 with a generic message and request ID

    Malformed input keeps the framework's response unchanged; the handler
    only adds a log line tagged with the request ID.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Path or body failed to decode — log, then defer to FastAPI."""
        rid = request_id_var.get("")
        logger.warning(
            "[%s] Rejected %s %s: %d validation error(s)",
            rid,
            request.method,
            request.url.path,
            len(exc.errors()),
        )
        return await request_validation_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for unexpected errors.

        The stack trace is logged server-side only, never returned.
        """
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="HelloUsers API",
        description="Greeting and users demo endpoints.",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added executes first: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(users.router)

    return app


# uvicorn expects `hellousers.main:app` to be importable
app = create_app()
