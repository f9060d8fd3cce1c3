"""Tests that the versioned migration builds the same schema as the models."""

from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy import create_engine, inspect
from sqlmodel import SQLModel

from src.consultrack.core.config import get_settings
from src.consultrack.core.migrations import run_migrations_async
from src.consultrack.models import Project, Visit  # noqa: F401

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
def migrated_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[str]:
    """Point migrations at a file-backed SQLite database."""
    url = f"sqlite:///{tmp_path / 'migrations.db'}"
    monkeypatch.setenv("DATABASE_MIGRATIONS_URL", url)
    get_settings.cache_clear()
    yield url
    get_settings.cache_clear()


async def test_upgrade_head_matches_models(migrated_url: str):
    await run_migrations_async()

    engine = create_engine(migrated_url)
    try:
        inspector = inspect(engine)
        assert {"projects", "visits", "alembic_version"} <= set(inspector.get_table_names())

        for table in SQLModel.metadata.sorted_tables:
            migrated = {c["name"]: c for c in inspector.get_columns(table.name)}
            assert set(migrated) == {c.name for c in table.columns}, table.name
            for column in table.columns:
                assert migrated[column.name]["nullable"] == column.nullable, (
                    f"{table.name}.{column.name}"
                )

            migrated_indexes = {
                ix["name"]: tuple(ix["column_names"]) for ix in inspector.get_indexes(table.name)
            }
            model_indexes = {
                ix.name: tuple(c.name for c in ix.columns) for ix in table.indexes
            }
            assert migrated_indexes == model_indexes, table.name
    finally:
        engine.dispose()


async def test_upgrade_is_repeatable(migrated_url: str):
    await run_migrations_async()
    await run_migrations_async()

    engine = create_engine(migrated_url)
    try:
        with engine.connect() as conn:
            version = conn.exec_driver_sql("SELECT version_num FROM alembic_version").scalar()
        assert version == "001"
    finally:
        engine.dispose()
