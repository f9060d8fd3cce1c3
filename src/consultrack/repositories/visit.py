"""Repository for Visit entity."""

from src.consultrack.models import Visit
from src.consultrack.repositories.base import BaseRepository


class VisitRepository(BaseRepository[Visit]):
    """Repository for Visit entity."""

    model = Visit
