"""Tests for the project lifecycle service against the test database."""

from datetime import date
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.consultrack.core.exceptions import NotFoundError, PreconditionError, ValidationError
from src.consultrack.models import RecordStatus
from src.consultrack.services import ProjectService
from tests.factories import ProjectFactory

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

CLOUD_MIGRATION = {
    "name": "Cloud Migration",
    "country": "Chile",
    "consultant": "Juan Pérez",
    "plannedHours": "40",
    "hourlyRate": "50,5",
}


async def test_create_project_normalizes_input(project_service: ProjectService):
    project = await project_service.create_project(CLOUD_MIGRATION)

    assert project.id is not None
    assert project.name == "Cloud Migration"
    assert project.planned_hours == 40.0
    assert project.hourly_rate == 50.5
    assert project.opportunity_amount == 0
    assert project.finalized is False
    assert project.active is True
    assert project.created_at == project.updated_at


async def test_create_invalid_project_writes_nothing(project_service: ProjectService):
    with pytest.raises(ValidationError) as exc_info:
        await project_service.create_project({"name": "X", "consultant": "Y"})

    assert exc_info.value.fields == ["country"]
    assert await project_service.list_projects(RecordStatus.ACTIVE) == []
    assert await project_service.list_projects(RecordStatus.ARCHIVED) == []


async def test_get_missing_project(project_service: ProjectService):
    with pytest.raises(NotFoundError):
        await project_service.get_project(uuid4())


async def test_update_preserves_absent_fields(project_service: ProjectService):
    created = await project_service.create_project(
        {**CLOUD_MIGRATION, "observations": "Phase one", "startDate": "2024-03-01"}
    )
    created_at = created.created_at

    updated = await project_service.update_project(created.id, {"finalizado": "true"})

    assert updated.finalized is True
    assert updated.name == "Cloud Migration"
    assert updated.planned_hours == 40.0
    assert updated.hourly_rate == 50.5
    assert updated.observations == "Phase one"
    assert updated.start_date == date(2024, 3, 1)
    assert updated.created_at == created_at
    assert updated.updated_at >= created_at


async def test_update_can_clear_optional_field(project_service: ProjectService):
    created = await project_service.create_project({**CLOUD_MIGRATION, "observations": "x"})

    updated = await project_service.update_project(created.id, {"observations": ""})

    assert updated.observations is None


async def test_update_checks_dates_against_stored_values(project_service: ProjectService):
    created = await project_service.create_project({**CLOUD_MIGRATION, "startDate": "2024-06-01"})

    with pytest.raises(ValidationError) as exc_info:
        await project_service.update_project(created.id, {"endDate": "2024-05-01"})
    assert exc_info.value.fields == ["end_date"]

    unchanged = await project_service.get_project(created.id)
    assert unchanged.end_date is None


async def test_update_missing_project(project_service: ProjectService):
    with pytest.raises(NotFoundError):
        await project_service.update_project(uuid4(), {"name": "New"})


async def test_invalid_update_is_reported_before_lookup(project_service: ProjectService):
    with pytest.raises(ValidationError):
        await project_service.update_project(uuid4(), {})


async def test_archive_requires_finalized(project_service: ProjectService):
    created = await project_service.create_project(CLOUD_MIGRATION)

    with pytest.raises(PreconditionError):
        await project_service.archive_project(created.id)

    still_active = await project_service.get_project(created.id)
    assert still_active.active is True


async def test_archive_finalized_project(project_service: ProjectService):
    created = await project_service.create_project({**CLOUD_MIGRATION, "finalized": True})

    archived = await project_service.archive_project(created.id)

    assert archived.active is False
    assert archived.finalized is True
    assert await project_service.list_projects(RecordStatus.ACTIVE) == []
    assert [p.id for p in await project_service.list_projects(RecordStatus.ARCHIVED)] == [
        created.id
    ]


async def test_archive_is_idempotent(project_service: ProjectService):
    created = await project_service.create_project({**CLOUD_MIGRATION, "finalized": True})
    first = await project_service.archive_project(created.id)
    archived_at = first.updated_at

    second = await project_service.archive_project(created.id)

    assert second.active is False
    assert second.updated_at == archived_at


async def test_archive_missing_project(project_service: ProjectService):
    with pytest.raises(NotFoundError):
        await project_service.archive_project(uuid4())


async def test_archived_project_can_still_be_fetched(
    project_service: ProjectService, db_session: AsyncSession
):
    project = ProjectFactory.archived()
    db_session.add(project)
    await db_session.commit()

    fetched = await project_service.get_project(project.id)

    assert fetched.active is False


async def test_finalized_but_not_archived_is_listed_as_active(project_service: ProjectService):
    created = await project_service.create_project({**CLOUD_MIGRATION, "finalized": True})

    active = await project_service.list_projects(RecordStatus.ACTIVE)

    assert [p.id for p in active] == [created.id]


async def test_each_project_gets_its_own_id(project_service: ProjectService):
    projects = [await project_service.create_project(CLOUD_MIGRATION) for _ in range(5)]

    assert len({p.id for p in projects}) == 5
    listed = await project_service.list_projects(RecordStatus.ACTIVE)
    assert {p.id for p in listed} == {p.id for p in projects}


async def test_structured_name_is_not_stored(project_service: ProjectService):
    with pytest.raises(ValidationError) as exc_info:
        await project_service.create_project({**CLOUD_MIGRATION, "name": {"a": 1}})

    assert exc_info.value.fields == ["name"]
    assert await project_service.list_projects() == []
