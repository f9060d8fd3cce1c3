"""FastAPI dependency injection definitions.

Re-exports all dependencies so routers import from one place.
"""

# Database
from src.consultrack.api.dependencies.db import (
    DatabaseDep,
    DBSession,
    get_database,
    get_db_session,
)

# Repositories
from src.consultrack.api.dependencies.repositories import (
    ProjectRepo,
    VisitRepo,
    get_project_repository,
    get_visit_repository,
)

# Services
from src.consultrack.api.dependencies.services import (
    ProjectServiceDep,
    VisitServiceDep,
    get_project_service,
    get_visit_service,
)

__all__ = [
    # Database
    "DatabaseDep",
    "DBSession",
    "get_database",
    "get_db_session",
    # Repositories
    "ProjectRepo",
    "VisitRepo",
    "get_project_repository",
    "get_visit_repository",
    # Services
    "ProjectServiceDep",
    "VisitServiceDep",
    "get_project_service",
    "get_visit_service",
]
