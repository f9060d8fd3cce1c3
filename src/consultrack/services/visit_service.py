"""Visit lifecycle service."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.consultrack.core.db import storage_guard
from src.consultrack.core.exceptions import NotFoundError
from src.consultrack.core.logging import get_logger
from src.consultrack.core.normalize import normalize_visit
from src.consultrack.models import RecordStatus, Visit
from src.consultrack.models.base import utc_now
from src.consultrack.repositories import VisitRepository
from src.consultrack.services.validation import validate_visit_create, validate_visit_update

logger = get_logger(__name__)


class VisitService:
    """Record, update, soft-delete and list commercial visits."""

    def __init__(self, visit_repo: VisitRepository, session: AsyncSession):
        self.visit_repo = visit_repo
        self.session = session

    async def _get_or_raise(self, visit_id: UUID) -> Visit:
        async with storage_guard(self.session, "visit.get"):
            visit = await self.visit_repo.get_by_id(visit_id)
        if visit is None:
            raise NotFoundError("Visit", visit_id)
        return visit

    async def _commit(self, visit: Visit, operation: str) -> None:
        async with storage_guard(self.session, operation):
            await self.session.commit()
            await self.session.refresh(visit)

    async def create_visit(self, raw: Mapping[str, Any]) -> Visit:
        values = validate_visit_create(normalize_visit(raw))

        now = utc_now()
        visit = Visit(**values, active=True, created_at=now, updated_at=now)
        self.visit_repo.add(visit)
        await self._commit(visit, "visit.create")

        logger.info("Visit created", visit_id=str(visit.id))
        return visit

    async def get_visit(self, visit_id: UUID) -> Visit:
        return await self._get_or_raise(visit_id)

    async def update_visit(self, visit_id: UUID, raw: Mapping[str, Any]) -> Visit:
        """Merge the fields present in ``raw`` over the stored visit."""
        changes = validate_visit_update(normalize_visit(raw))
        visit = await self._get_or_raise(visit_id)

        self.visit_repo.apply(visit, changes)
        visit.updated_at = utc_now()
        await self._commit(visit, "visit.update")

        logger.info("Visit updated", visit_id=str(visit.id), fields=sorted(changes))
        return visit

    async def delete_visit(self, visit_id: UUID) -> Visit:
        """Soft-delete a visit. Deleting an already deleted visit changes nothing."""
        visit = await self._get_or_raise(visit_id)
        if not visit.active:
            return visit

        visit.active = False
        visit.updated_at = utc_now()
        await self._commit(visit, "visit.delete")

        logger.info("Visit deleted", visit_id=str(visit.id))
        return visit

    async def list_visits(self, status: RecordStatus = RecordStatus.ACTIVE) -> list[Visit]:
        async with storage_guard(self.session, "visit.list"):
            return await self.visit_repo.list_by_status(status)
