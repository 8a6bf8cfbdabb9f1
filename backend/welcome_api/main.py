"""Welcome API — FastAPI application factory and server entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handler maps any unhandled exception → 500 JSON
    - start_server() binds a socket only outside test mode
    - "Server is running on port N" is logged only after the bind succeeds
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - create_app(settings, clock) factory: handlers testable with a fake clock
    - Module-level `app` for `uvicorn welcome_api.main:app` and in-process tests
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from welcome_api.api.error_handlers import register_error_handlers
from welcome_api.api.routes import health, welcome
from welcome_api.config import Settings, get_settings
from welcome_api.core.uptime import UptimeClock, process_clock
from welcome_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, clock: UptimeClock | None = None,
) -> FastAPI:
    """Build the ASGI app with its routes and error handlers."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info("Welcome API started")
        yield
        logger.info("Welcome API shutting down")

    app = FastAPI(title="Welcome API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.clock = clock or process_clock

    # Routes — explicit registration
    app.include_router(welcome.router)
    app.include_router(health.router)

    register_error_handlers(app)
    return app


class _AnnouncingServer(uvicorn.Server):
    """uvicorn Server that logs the listening port once sockets are bound."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(
                f"Server is running on port {self.config.port}",
                extra={"port": self.config.port},
            )


def start_server(settings: Settings, app: FastAPI | None = None) -> FastAPI:
    """Serve the app on settings.port unless running in test mode.

    Returns the app so a test harness can drive it in-process.
    """
    app = app or create_app(settings)
    if settings.is_test_mode:
        logger.debug("Test mode: not binding a listening socket")
        return app
    setup_logging(settings.log_level, settings.log_format)
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )
    _AnnouncingServer(config).run()
    return app


app = create_app(get_settings())


def main() -> None:
    start_server(get_settings(), app)


if __name__ == "__main__":
    main()
