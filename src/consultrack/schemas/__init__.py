from src.consultrack.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from src.consultrack.schemas.visit import VisitCreate, VisitRead, VisitUpdate

__all__ = [
    # Project
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    # Visit
    "VisitCreate",
    "VisitRead",
    "VisitUpdate",
]
