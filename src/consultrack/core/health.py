"""Health check endpoints and Prometheus metrics."""

import secrets

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator

from src.consultrack.core.config import Settings
from src.consultrack.core.db.session import STORAGE_FAILURES
from src.consultrack.core.logging import get_logger

logger = get_logger(__name__)


def setup_health_endpoint(app: FastAPI) -> None:
    """Configure the liveness and database health endpoints."""

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        """Liveness probe. Touches no dependency."""
        return {"status": "ok"}

    @app.get("/health/db", tags=["health"])
    async def health_db(request: Request) -> JSONResponse:
        """Round-trip the database and report whether it answered."""
        try:
            await request.app.state.database.ping()
        except STORAGE_FAILURES as e:
            logger.warning("Database health check failed", error=str(e))
            return JSONResponse(
                content={"status": "unhealthy", "database": "unreachable"},
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return JSONResponse(content={"status": "healthy", "database": "healthy"})


def setup_metrics(app: FastAPI, settings: Settings) -> None:
    """Configure Prometheus metrics with optional API key protection."""
    instrumentator = Instrumentator().instrument(app)

    if settings.metrics_api_key:
        api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

        async def verify_metrics_key(
            api_key: str | None = Depends(api_key_header),
        ) -> None:
            if (
                api_key is None
                or settings.metrics_api_key is None
                or not secrets.compare_digest(api_key, settings.metrics_api_key)
            ):
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Invalid or missing metrics API key",
                )

        instrumentator.expose(app, endpoint="/metrics", dependencies=[Depends(verify_metrics_key)])
    else:
        instrumentator.expose(app, endpoint="/metrics")
