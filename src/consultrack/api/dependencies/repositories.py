"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.consultrack.api.dependencies.db import DBSession
from src.consultrack.repositories import ProjectRepository, VisitRepository


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_visit_repository(session: DBSession) -> VisitRepository:
    return VisitRepository(session)


ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
VisitRepo = Annotated[VisitRepository, Depends(get_visit_repository)]
