"""Base repository with common CRUD operations."""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.consultrack.models.enums import RecordStatus


class BaseRepository[ModelType: SQLModel]:
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.

    Models are expected to carry ``id``, ``active`` and ``created_at`` columns.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a record by its primary key, archived or not."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    def apply(self, entity: ModelType, changes: dict[str, Any]) -> ModelType:
        """Copy only the given fields onto a loaded entity."""
        for field, value in changes.items():
            setattr(entity, field, value)
        return entity

    async def list_by_status(self, status: RecordStatus) -> list[ModelType]:
        """List rows on one side of the soft-delete flag, newest first."""
        query = (
            select(self.model)
            .where(self.model.active == status.is_active)  # type: ignore[attr-defined]
            .order_by(self.model.created_at.desc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_active(self) -> list[ModelType]:
        return await self.list_by_status(RecordStatus.ACTIVE)

    async def list_archived(self) -> list[ModelType]:
        return await self.list_by_status(RecordStatus.ARCHIVED)
