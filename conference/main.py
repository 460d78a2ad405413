"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from conference import __version__
from conference.config import settings
from conference.dispatcher import SessionDispatcher
from conference.models import ErrorResponse
from conference.routes import health, sessions
from conference.session_store import SessionStore, seed_sample_session

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown logging. The store lives as long as the app."""
    logger.info("Conference API started with %d session(s)", len(app.state.store))
    yield
    logger.info("Conference API stopped")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework-level 404/405s in the same shape as dispatcher errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail).lower()).model_dump(),
        headers=getattr(exc, "headers", None),
    )


def create_app(store: SessionStore | None = None) -> FastAPI:
    """Build the app around a store.

    Without an injected store a fresh one is created (and seeded with the
    sample session when configured to).
    """
    if store is None:
        store = SessionStore()
        if settings.seed_sample_session:
            seed_sample_session(store)

    app = FastAPI(
        title="Conference Sessions",
        description="In-memory CRUD API for conference sessions",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.store = store
    app.state.dispatcher = SessionDispatcher(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(health.router)
    app.include_router(sessions.router)
    return app


app = create_app()
