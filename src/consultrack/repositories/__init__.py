"""Repository layer - data access abstraction."""

from src.consultrack.repositories.base import BaseRepository
from src.consultrack.repositories.project import ProjectRepository
from src.consultrack.repositories.visit import VisitRepository

__all__ = [
    "BaseRepository",
    "ProjectRepository",
    "VisitRepository",
]
