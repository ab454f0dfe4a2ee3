"""FastAPI application factory. No business logic; only wiring, lifecycle and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from parksys import __version__
from parksys.api import legacy_router
from parksys.api import router as api_router
from parksys.core.config import Settings, get_settings
from parksys.core.database import Database
from parksys.core.errors import register_error_handlers
from parksys.core.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """
    Build the application.

    The connection pool is opened in the lifespan startup and disposed at
    shutdown. Passing ``database`` (tests) installs it immediately instead and
    leaves its disposal to the caller.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owns_database = getattr(app.state, "database", None) is None
        if owns_database:
            app.state.database = Database.from_settings(settings)
            logger.info("Database connection pool opened (pool_size=%s)", settings.DB_POOL_SIZE)
            if not app.state.database.ping():
                # Requests will fail until the database comes back; health reports "degraded".
                logger.warning("Database unreachable at startup")
        try:
            yield
        finally:
            if owns_database:
                app.state.database.dispose()
                app.state.database = None

    app = FastAPI(
        title="ParkSys API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)
    app.include_router(legacy_router)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "ParkSys API"}

    return app


app = create_app()
