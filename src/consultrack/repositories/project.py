"""Repository for Project entity."""

from src.consultrack.models import Project
from src.consultrack.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project
