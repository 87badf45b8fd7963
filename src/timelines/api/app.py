"""
FastAPI Application Factory & Configuration.

This module initializes the FastAPI application instance. It is responsible for:
1.  **Middleware Setup**: CORS for editor/front-end access.
2.  **Exception Handling**: Global handlers so all errors return structured JSON.
3.  **Routing**: Mounting the timeline router and the health probe.
4.  **Lifecycle**: Applying body-level marker visibility at startup and
    removing it again at shutdown.

Design Pattern
--------------
We use an **Application Factory** pattern (`create_app`). This allows for:
-   Easy testing (separate app instances per test, injected config stores).
-   Swapping the prose renderer without touching the routes.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from timelines import __version__
from timelines.api.routers import timeline
from timelines.core.config_store import ConfigStore
from timelines.core.settings import get_logger, load_settings
from timelines.render.markers import MarkerVisibility
from timelines.render.nodes import Node
from timelines.render.prose import MarkdownProseRenderer, ProseRenderer

log = get_logger("timelines.api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    ASGI Lifespan context manager.

    - **Startup**: load the persisted settings and apply marker visibility
      to the shared document body.
    - **Shutdown**: remove the visibility class again.
    """
    log.info("Starting up...")
    store: ConfigStore = app.state.config_store
    with MarkerVisibility(app.state.body, store.load()) as visibility:
        app.state.marker_visibility = visibility
        log.info("Marker visibility applied (hidden=%s).", visibility.markers_hidden)
        yield
    log.info("Shutting down...")


def create_app(
    config_store: ConfigStore | None = None,
    prose: ProseRenderer | None = None,
) -> FastAPI:
    """
    Construct and configure the TimeLines FastAPI application.

    Parameters
    ----------
    config_store:
        Store for the persisted render configuration; defaults to the one at
        `TIMELINES_SETTINGS_PATH`.
    prose:
        Markdown renderer for entry bodies; defaults to markdown-it-py.
    """
    app = FastAPI(
        title="TimeLines API",
        description="Render plain-text chronologies as timelines.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.config_store = config_store if config_store is not None else ConfigStore()
    app.state.prose = prose if prose is not None else MarkdownProseRenderer()
    app.state.body = Node("body")

    # -----------------------------------------------------------------------
    # Middleware
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Global Exception Handlers
    # -----------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Return structured JSON instead of a bare 500 page."""
        log.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": str(exc),
                "path": request.url.path,
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        """Map Python ValueErrors to HTTP 400 Bad Request."""
        return JSONResponse(
            status_code=400,
            content={
                "error": "Bad Request",
                "detail": str(exc),
            },
        )

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    app.include_router(timeline.router)

    @app.get("/health", tags=["System"])
    async def health_check() -> dict[str, str]:
        """Simple liveness probe."""
        return {
            "status": "ok",
            "environment": load_settings().environment,
            "version": __version__,
        }

    return app


__all__ = ["create_app"]
