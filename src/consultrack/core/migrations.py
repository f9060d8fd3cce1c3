"""Reusable migration runner for deployments and tests.

Run ``python -m src.consultrack.core.migrations`` (or ``alembic upgrade head``)
from the repository root to create or upgrade the ``projects`` and ``visits``
tables.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from alembic.config import Config

from alembic import command

ALEMBIC_INI = Path(__file__).resolve().parents[3] / "alembic.ini"


def run_migrations_sync(revision: str = "head") -> None:
    """Run Alembic migrations synchronously up to ``revision``."""
    alembic_cfg = Config(str(ALEMBIC_INI))
    command.upgrade(alembic_cfg, revision)


async def run_migrations_async(revision: str = "head") -> None:
    """Run Alembic migrations from async context.

    Uses ThreadPoolExecutor to avoid event loop conflicts with Alembic.
    """
    loop = asyncio.get_running_loop()
    with ThreadPoolExecutor() as pool:
        await loop.run_in_executor(pool, run_migrations_sync, revision)


if __name__ == "__main__":
    run_migrations_sync()
