"""
RecordBook Backend — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes app configuration, middleware registration, route mounting,
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn recordbook.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────┐ ┌──────┐ │
    │  │ Req ID   │→│  Logging        │→│ GZip │→│ CORS │ │
    │  └──────────┘ └─────────────────┘ └──────┘ └──────┘ │
    │                                                     │
    │  Routes:                                            │
    │  /api/financial-history  /api/associated-files      │
    │  /api/associated-history /health                    │
    │                                                     │
    │  Exception Handler (one, keyed by ErrorKind):       │
    │  VALIDATION→422 │ NOT_FOUND→404 │ EMPTY_RESULT→404  │
    │  INTERNAL→500                                       │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from recordbook import __version__
from recordbook.config import settings
from recordbook.database import dispose_engine
from recordbook.exceptions import ErrorKind, RecordBookError
from recordbook.middleware.request_id import RequestIDMiddleware
from recordbook.middleware.logging import RequestLoggingMiddleware
from recordbook.routes import health, records
from recordbook.schemas.records import error_envelope

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging, banner. Shutdown: dispose the database engine.

    Schema creation is Alembic's job (alembic upgrade head), not the app's.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("RecordBook Backend %s starting up...", __version__)
    logger.info("Record routes mounted under '%s'", settings.api_prefix or "/")
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("RecordBook Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    # request_id_var is reset before the Exception handler runs
    # (ServerErrorMiddleware sits outside the user middleware); request.state is not.
    return getattr(request.state, "request_id", "")


def _log_failure(
    request: Request,
    kind: ErrorKind,
    message: str,
    context: dict,
    exc: Optional[BaseException] = None,
) -> None:
    rid = _request_id(request)
    if kind is ErrorKind.INTERNAL:
        logger.error(
            "[%s] %s error: %s | Context: %s", rid, kind.value, message, context,
            exc_info=exc,
        )
    else:
        logger.warning("[%s] %s: %s", rid, kind.value, message)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map failures to HTTP status codes and the {status: false, message} envelope.

    Handler hierarchy:
        RecordBookError         → exc.kind.status_code (422 / 404 / 500)
        RequestValidationError  → 422 (malformed JSON, non-integer path id)
        HTTPException           → its own status (unknown route, bad method)
        Exception (fallback)    → 500, generic message

    Security: internal details (SQL, stack traces) are logged, never returned.
    """

    @app.exception_handler(RecordBookError)
    async def handle_record_error(request: Request, exc: RecordBookError):
        _log_failure(request, exc.kind, exc.message, exc.context, exc)
        errors = getattr(exc, "errors", None)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(exc.message, errors),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ())[1:]) or "body",
                "message": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        fields = sorted({e["field"] for e in errors})
        message = f"Dados inválidos: {', '.join(fields)}"
        _log_failure(request, ErrorKind.VALIDATION, message, {})
        return JSONResponse(
            status_code=ErrorKind.VALIDATION.status_code,
            content=error_envelope(message, errors),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: generic 500, full stack trace in the server log only."""
        rid = _request_id(request)
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=error_envelope(INTERNAL_ERROR_MESSAGE),
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
        title="RecordBook API",
        description=(
            "Financial history entries, member files and member history entries "
            "for the member-management backend."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    for router in records.routers:
        app.include_router(router)
    app.include_router(health.router)

    return app


app = create_app()
