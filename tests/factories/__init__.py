"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectFactory, VisitFactory
"""

from tests.factories.base import BaseFactory, generate_uuid, utc_now
from tests.factories.project import ProjectFactory
from tests.factories.visit import VisitFactory

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid",
    "utc_now",
    # Records
    "ProjectFactory",
    "VisitFactory",
]
