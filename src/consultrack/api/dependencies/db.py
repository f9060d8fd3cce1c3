"""Database session dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.consultrack.core.db import Database


def get_database(request: Request) -> Database:
    """Return the storage client created in the application lifespan."""
    return request.app.state.database


DatabaseDep = Annotated[Database, Depends(get_database)]


async def get_db_session(database: DatabaseDep) -> AsyncGenerator[AsyncSession]:
    """Get a database session scoped to the current request."""
    async with database.session() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
