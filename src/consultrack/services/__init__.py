from src.consultrack.services.project_service import ProjectService
from src.consultrack.services.visit_service import VisitService

__all__ = ["ProjectService", "VisitService"]
