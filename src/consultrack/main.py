from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.consultrack.api.middlewares import setup_middlewares
from src.consultrack.api.v1.router import build_api_router
from src.consultrack.core.config import Settings, get_settings
from src.consultrack.core.db import Database
from src.consultrack.core.exceptions import setup_exception_handlers
from src.consultrack.core.health import setup_health_endpoint, setup_metrics
from src.consultrack.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

OPENAPI_TAGS = [
    {"name": "projects", "description": "Consulting projects and their archive lifecycle"},
    {"name": "visits", "description": "Commercial visits to clients"},
    {"name": "health", "description": "Liveness and database health probes"},
]


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings to use; defaults to the cached environment settings.
        database: Storage client to use. When omitted, one is created from
            ``settings`` on startup and disposed on shutdown. An injected
            client is left open for its owner to dispose.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """Application lifespan - startup and shutdown."""
        setup_logging(settings.debug)
        logger.info(f"Starting {settings.app_name}", env=settings.app_env)

        owned = database is None
        if owned:
            app.state.database = Database.from_settings(settings)

        yield

        logger.info("Closing connections...")
        if owned:
            await app.state.database.dispose()
        logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        description="Consulting project and commercial visit tracking API",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
        lifespan=lifespan,
    )
    if database is not None:
        app.state.database = database

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(build_api_router(settings.api_prefix))

    setup_metrics(app, settings)
    setup_health_endpoint(app)

    return app


app = create_app()
