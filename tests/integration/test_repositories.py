"""Tests for repository listing and partial apply."""

from datetime import timedelta

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.consultrack.models import RecordStatus
from src.consultrack.repositories import ProjectRepository, VisitRepository
from tests.factories import ProjectFactory, VisitFactory, utc_now

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def test_list_partitions_by_active_flag(db_session: AsyncSession):
    active = ProjectFactory.build()
    finalized = ProjectFactory.finalized_project()
    archived = ProjectFactory.archived()
    db_session.add_all([active, finalized, archived])
    await db_session.commit()

    repo = ProjectRepository(db_session)
    active_ids = {p.id for p in await repo.list_active()}
    archived_ids = {p.id for p in await repo.list_archived()}

    assert active_ids == {active.id, finalized.id}
    assert archived_ids == {archived.id}
    assert active_ids.isdisjoint(archived_ids)


async def test_list_is_newest_first(db_session: AsyncSession):
    now = utc_now()
    oldest = VisitFactory.build(created_at=now - timedelta(days=2))
    newest = VisitFactory.build(created_at=now)
    middle = VisitFactory.build(created_at=now - timedelta(days=1))
    db_session.add_all([oldest, newest, middle])
    await db_session.commit()

    visits = await VisitRepository(db_session).list_by_status(RecordStatus.ACTIVE)

    assert [v.id for v in visits] == [newest.id, middle.id, oldest.id]


async def test_get_by_id_returns_archived_rows(db_session: AsyncSession):
    deleted = VisitFactory.deleted()
    db_session.add(deleted)
    await db_session.commit()

    found = await VisitRepository(db_session).get_by_id(deleted.id)

    assert found is not None
    assert found.active is False


async def test_apply_only_touches_given_fields(db_session: AsyncSession):
    project = ProjectFactory.build(name="Before", country="Perú")
    repo = ProjectRepository(db_session)

    repo.apply(project, {"name": "After"})

    assert project.name == "After"
    assert project.country == "Perú"
