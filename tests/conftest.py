"""Root test fixtures shared across all test types.

Database-backed fixtures are in tests/integration/conftest.py.
"""

import os

os.environ.setdefault("APP_ENV", "testing")
# Tests never reach a real PostgreSQL server
os.environ.setdefault("DATABASE_SSL_MODE", "disable")

# ruff: noqa: E402 - Imports must be after env var setup
from src.consultrack.core.config import get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()
