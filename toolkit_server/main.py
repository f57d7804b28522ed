"""Toolkit Server — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - The catch-all route is registered last, so exact paths always win
    - Start time captured once per app in create_app, stored on app.state
    - No docs/openapi routes: every path outside the four endpoints hits the catch-all
    - Every request runs under the read/write deadlines from Settings

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - create_app factory: tests build isolated apps with their own Settings
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from toolkit_server.api.error_handlers import register_error_handlers
from toolkit_server.api.http_methods import ALL_METHODS
from toolkit_server.api.routes import api_info, health, home, not_found
from toolkit_server.api.timeouts import RequestTimeoutMiddleware
from toolkit_server.config import PORT, Settings, get_settings
from toolkit_server.core.uptime import ServerStartTime
from toolkit_server.infrastructure.console import schedule_server_info

logger = logging.getLogger(__name__)

CATCH_ALL_PATH = "/{path:path}"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    started: ServerStartTime = app.state.started
    banner = schedule_server_info(PORT, settings.banner_delay_seconds)
    logger.info(f"Server started at {started.wall:%Y-%m-%d %H:%M:%S}")
    yield
    banner.cancel()
    logger.info("Server shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Go Beginner Toolkit Server",
        version=settings.api_version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.started = ServerStartTime()

    app.include_router(api_info.router)
    app.include_router(health.router)
    app.include_router(not_found.router)
    app.include_router(home.router)

    fallback = home.home if settings.catch_all_home else not_found.not_found
    app.add_api_route(
        CATCH_ALL_PATH, fallback, methods=ALL_METHODS, include_in_schema=False,
    )

    app.add_middleware(
        RequestTimeoutMiddleware,
        read_timeout=settings.read_timeout_seconds,
        write_timeout=settings.write_timeout_seconds,
    )
    register_error_handlers(app)
    return app


app = create_app()
