"""
QuickNotes Backend: FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app(store) returns a configured FastAPI instance
       that owns the given NoteStore (a fresh one when omitted).
Who:   uvicorn (quicknotes.main:app), the CLI entry point and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────────────┐  │
    │  │ Req ID   │→│  Logging    │→│  CORS → Errors   │  │
    │  └──────────┘ └─────────────┘ └──────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌────────────────┐ ┌───────────┐  │
    │  │ GET/POST     │ │ GET            │ │ GET       │  │
    │  │ /notes       │ │ /notes/{id}    │ │ /health   │  │
    │  └──────────────┘ └────────────────┘ └───────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ QuickNotesError → status by code             │   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  State: app.state.note_store, app.state.note_service│
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import Response

from quicknotes import __version__
from quicknotes.config import settings
from quicknotes.exceptions import QuickNotesError
from quicknotes.middleware.errors import UnexpectedErrorMiddleware
from quicknotes.middleware.logging import RequestLoggingMiddleware
from quicknotes.middleware.request_id import RequestIDMiddleware, request_id_var
from quicknotes.responses import error_response
from quicknotes.routes import health, notes
from quicknotes.services.note_service import NoteService
from quicknotes.services.note_store import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout
    (container runtimes capture stdout).
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("QuickNotes API %s starting up (%d notes in memory)",
                __version__, app.state.note_store.count)

    yield

    # Notes are process memory only; nothing to flush.
    logger.info("Shutting down, discarding %d notes", app.state.note_store.count)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to error envelopes.

    Handler hierarchy:
        QuickNotesError → status from STATUS_CODES by error code
        Anything else is answered by UnexpectedErrorMiddleware (internal / 500)
    """

    @app.exception_handler(QuickNotesError)
    async def handle_api_error(request: Request, exc: QuickNotesError) -> Response:
        rid = request_id_var.get("")
        status = exc.status_code
        logger.log(
            logging.ERROR if status >= 500 else logging.WARNING,
            "[%s] API request error: %s [%d]",
            rid,
            exc,
            status,
        )
        return error_response(exc)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[NoteStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: NoteStore the app will own. Tests pass their own to inspect it;
               omitted, a fresh empty store is created.
    """
    app = FastAPI(
        title="QuickNotes API",
        description="Create and list short text notes, held in process memory.",
        version=__version__,
        lifespan=lifespan,
    )

    note_store = store if store is not None else NoteStore()
    app.state.note_store = note_store
    app.state.note_service = NoteService(note_store)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added executes first: RequestID → Logging → CORS → UnexpectedError
    app.add_middleware(UnexpectedErrorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


# uvicorn expects `quicknotes.main:app` to be importable
app = create_app()
