"""
Notes API — FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own NoteStore on app.state.
Who:   Called by uvicorn (uvicorn app.main:app) and by the test suite,
       which builds one app per test for an isolated store.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌────────┐ ┌──────────┐  │
    │  │  Req ID  │→│ Logging  │→│  GZip  │→│   CORS   │  │
    │  └──────────┘ └──────────┘ └────────┘ └──────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────┐ ┌─────────────────┐   │
    │  │ /notes (auth gate + CRUD)│ │ GET /health     │   │
    │  └──────────────────────────┘ └─────────────────┘   │
    │                                                     │
    │  Exception Handlers (text/plain bodies):            │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ 401 │ 403 │ 404 │ 422 │ 500                  │   │
    │  └──────────────────────────────────────────────┘   │
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
from fastapi.responses import PlainTextResponse

from app import __version__
from app.config import OwnershipPolicy, Settings, settings as default_settings
from app.exceptions import NotesError, ValidationError
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from app.routes import health, notes
from app.storage import NoteStore

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Ein unerwarteter Fehler ist aufgetreten. Bitte versuchen Sie es erneut."


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure logging for the entire application.

    Called once from the lifespan, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # We write our own access log line
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, report the ownership policy.
    Shutdown: drop the in-memory notes.
    """
    config: Settings = app.state.settings
    setup_logging(config.log_level)
    logger.info("=" * 60)
    logger.info("%s %s starting up...", config.app_name, __version__)
    logger.info("Ownership policy: %s", config.ownership_policy.value)

    if config.ownership_policy is OwnershipPolicy.LEGACY:
        logger.warning(
            "Legacy ownership policy active: PUT, PATCH and DELETE on /notes/{id} "
            "do not check the note owner. Any authenticated caller can modify "
            "or delete any note."
        )

    logger.info("Server ready at http://%s:%d", config.backend_host, config.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("%s shutting down, discarding %d notes", config.app_name, len(app.state.store))
    app.state.store.clear()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    return request_id_var.get("") or getattr(request.state, "request_id", "")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to plain-text responses.

    Handler hierarchy:
        NotesError (and subclasses)  → exc.status_code, body = exc.message
        RequestValidationError       → 422 via ValidationError
        Exception (fallback)         → 500, generic message

    The body is only ever the user-facing message. Context dicts and stack
    traces go to the log.
    """

    @app.exception_handler(NotesError)
    async def handle_notes_error(request: Request, exc: NotesError):
        rid = _request_id(request)
        if exc.status_code >= 500:
            logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
        else:
            logger.debug("[%s] %d %s | Context: %s", rid, exc.status_code, exc.message, exc.context)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Malformed body, e.g. a missing title on POST or a number where a string belongs."""
        # loc is ("body", "title"); drop the leading source part. Malformed
        # JSON reports ("body", <byte offset>), which is not a field name.
        fields = [
            ".".join(str(part) for part in err.get("loc", ())[1:] if not isinstance(part, int))
            for err in exc.errors()
        ]
        fields = [f for f in fields if f]
        error = ValidationError(context={"errors": exc.errors()})
        if fields:
            error.message = "Ungültiger Anfrageinhalt: " + ", ".join(fields)
        logger.warning("[%s] Validation error: %s", _request_id(request), error.message)
        return PlainTextResponse(error.message, status_code=error.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all: no stack trace in the response, full trace in the log.

        Runs in ServerErrorMiddleware, outside RequestIDMiddleware, so the
        X-Request-ID header is set here from request.state.
        """
        rid = _request_id(request)
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        headers = {REQUEST_ID_HEADER: rid} if rid else None
        return PlainTextResponse(UNEXPECTED_ERROR_MESSAGE, status_code=500, headers=headers)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    store: Optional[NoteStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Overrides the environment-derived settings (tests use this
                  to switch ownership policies).
        store:    Pre-built note store; a fresh empty one by default.
    """
    config = settings or default_settings

    app = FastAPI(
        title=config.app_name,
        description="Authenticated CRUD API for user-owned notes.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Set here, not in the lifespan: ASGI test transports skip lifespan events
    app.state.settings = config
    app.state.store = store if store is not None else NoteStore()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: Request ID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
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
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_level=default_settings.log_level.lower(),
    )


# uvicorn expects `app.main:app` to be importable
app = create_app()
