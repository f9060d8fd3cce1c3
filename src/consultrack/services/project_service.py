"""Project lifecycle service."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.consultrack.core.db import storage_guard
from src.consultrack.core.exceptions import NotFoundError, PreconditionError
from src.consultrack.core.logging import get_logger
from src.consultrack.core.normalize import normalize_project
from src.consultrack.models import Project, RecordStatus
from src.consultrack.models.base import utc_now
from src.consultrack.repositories import ProjectRepository
from src.consultrack.services.validation import (
    merged_date_order,
    validate_project_create,
    validate_project_update,
)

logger = get_logger(__name__)


class ProjectService:
    """Create, update, archive and list projects.

    Raw client payloads go through normalization and validation before any
    statement is issued; each mutation is committed as its own transaction.
    """

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def _get_or_raise(self, project_id: UUID) -> Project:
        async with storage_guard(self.session, "project.get"):
            project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project", project_id)
        return project

    async def _commit(self, project: Project, operation: str) -> None:
        async with storage_guard(self.session, operation):
            await self.session.commit()
            await self.session.refresh(project)

    async def create_project(self, raw: Mapping[str, Any]) -> Project:
        """Normalize, validate and insert a new project.

        Raises:
            ValidationError: If any field fails validation (nothing is written).
            StorageError: If the insert fails.
        """
        values = validate_project_create(normalize_project(raw))

        now = utc_now()
        project = Project(**values, active=True, created_at=now, updated_at=now)
        self.project_repo.add(project)
        await self._commit(project, "project.create")

        logger.info("Project created", project_id=str(project.id))
        return project

    async def get_project(self, project_id: UUID) -> Project:
        """Fetch one project, archived or not."""
        return await self._get_or_raise(project_id)

    async def update_project(self, project_id: UUID, raw: Mapping[str, Any]) -> Project:
        """Merge the fields present in ``raw`` over the stored project.

        Fields absent from ``raw`` keep their stored value. ``updated_at`` is
        always refreshed. Concurrent updates to the same project are
        last-write-wins.
        """
        changes = validate_project_update(normalize_project(raw))
        project = await self._get_or_raise(project_id)
        merged_date_order(changes, project.start_date, project.end_date)

        self.project_repo.apply(project, changes)
        project.updated_at = utc_now()
        await self._commit(project, "project.update")

        logger.info("Project updated", project_id=str(project.id), fields=sorted(changes))
        return project

    async def archive_project(self, project_id: UUID) -> Project:
        """Soft-delete a finalized project.

        Archiving an already archived project is a no-op that returns it as is.

        Raises:
            NotFoundError: If the project does not exist.
            PreconditionError: If the project is not finalized (nothing changes).
        """
        project = await self._get_or_raise(project_id)
        if not project.finalized:
            raise PreconditionError(
                "Project must be finalized before it can be archived; "
                "update it with finalized=true first"
            )
        if not project.active:
            return project

        project.active = False
        project.updated_at = utc_now()
        await self._commit(project, "project.archive")

        logger.info("Project archived", project_id=str(project.id))
        return project

    async def list_projects(self, status: RecordStatus = RecordStatus.ACTIVE) -> list[Project]:
        """List projects on one side of the archive flag, newest first.

        ``active`` means "not archived": finalized projects that have not been
        archived yet are still listed as active.
        """
        async with storage_guard(self.session, "project.list"):
            return await self.project_repo.list_by_status(status)
