"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.consultrack.api.dependencies.db import DBSession
from src.consultrack.api.dependencies.repositories import ProjectRepo, VisitRepo
from src.consultrack.services import ProjectService, VisitService


def get_project_service(project_repo: ProjectRepo, session: DBSession) -> ProjectService:
    """Get project service."""
    return ProjectService(project_repo, session)


def get_visit_service(visit_repo: VisitRepo, session: DBSession) -> VisitService:
    """Get visit service."""
    return VisitService(visit_repo, session)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
VisitServiceDep = Annotated[VisitService, Depends(get_visit_service)]
