"""Database utilities - engine, session, migrations."""

from src.consultrack.core.db.engine import Database, create_engine_from_settings
from src.consultrack.core.db.session import storage_guard

__all__ = [
    # Engine
    "Database",
    "create_engine_from_settings",
    # Session
    "storage_guard",
]
