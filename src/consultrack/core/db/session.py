"""Session helpers shared by the service layer."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.consultrack.core.exceptions import StorageError
from src.consultrack.core.logging import get_logger

logger = get_logger(__name__)

# Failures that mean the round trip to the store did not complete
STORAGE_FAILURES: tuple[type[BaseException], ...] = (SQLAlchemyError, TimeoutError, OSError)


@asynccontextmanager
async def storage_guard(session: AsyncSession, operation: str) -> AsyncGenerator[None]:
    """Turn driver and timeout failures into an opaque ``StorageError``.

    The session is rolled back and the original error is logged with full
    detail. Nothing is retried.
    """
    try:
        yield
    except STORAGE_FAILURES as e:
        logger.exception("Storage operation failed", operation=operation, error=str(e))
        try:
            await session.rollback()
        except STORAGE_FAILURES as rollback_error:
            logger.warning(
                "Rollback after storage failure also failed",
                operation=operation,
                error=str(rollback_error),
            )
        raise StorageError() from e
