"""Model exports.

Import from here: `from src.consultrack.models import Project, Visit`
"""

from src.consultrack.models.enums import RecordStatus
from src.consultrack.models.project import Project
from src.consultrack.models.visit import Visit

__all__ = [
    # Enums
    "RecordStatus",
    # Tables
    "Project",
    "Visit",
]
