"""End-to-end tests for the project endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

CLOUD_MIGRATION = {
    "name": "Cloud Migration",
    "country": "Chile",
    "consultant": "Juan Pérez",
    "plannedHours": "40",
    "hourlyRate": "50,5",
}


async def _create(client: AsyncClient, **overrides) -> dict:
    response = await client.post("/projects", json={**CLOUD_MIGRATION, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_project_returns_flat_record(client: AsyncClient):
    data = await _create(client)

    assert data["name"] == "Cloud Migration"
    assert data["country"] == "Chile"
    assert data["consultant"] == "Juan Pérez"
    assert data["planned_hours"] == 40.0
    assert data["hourly_rate"] == 50.5
    assert data["opportunity_amount"] == 0
    assert data["finalized"] is False
    assert data["active"] is True
    assert "id" in data
    assert "data" not in data


async def test_create_then_list(client: AsyncClient):
    created = await _create(client)

    response = await client.get("/projects")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [created["id"]]


async def test_create_missing_country(client: AsyncClient):
    response = await client.post("/projects", json={"name": "X", "consultant": "Y"})

    assert response.status_code == 422
    data = response.json()
    assert data["kind"] == "validation_error"
    assert data["errors"] == [{"field": "country", "reason": "is required"}]
    assert data["request_id"]


async def test_create_rejects_non_object_body(client: AsyncClient):
    response = await client.post("/projects", json=["not", "an", "object"])

    assert response.status_code == 422
    assert response.json()["kind"] == "validation_error"


async def test_update_finalized_then_archive(client: AsyncClient):
    created = await _create(client)
    project_id = created["id"]

    updated = await client.put(f"/projects/{project_id}", json={"finalized": True})
    assert updated.status_code == 200
    assert updated.json()["finalized"] is True
    assert updated.json()["hourly_rate"] == 50.5

    archived = await client.post(f"/projects/{project_id}/archive")
    assert archived.status_code == 200
    assert archived.json()["active"] is False

    active = await client.get("/projects")
    archived_list = await client.get("/projects", params={"status": "archived"})
    assert active.json() == []
    assert [p["id"] for p in archived_list.json()] == [project_id]

    fetched = await client.get(f"/projects/{project_id}")
    assert fetched.status_code == 200
    assert fetched.json()["active"] is False


async def test_archive_unfinalized_project_conflicts(client: AsyncClient):
    created = await _create(client)

    response = await client.post(f"/projects/{created['id']}/archive")

    assert response.status_code == 409
    assert response.json()["kind"] == "precondition_failed"
    assert (await client.get(f"/projects/{created['id']}")).json()["active"] is True


async def test_legacy_delete_archives(client: AsyncClient):
    created = await _create(client, finalizado="sí")

    response = await client.delete(f"/projects/{created['id']}")

    assert response.status_code == 200
    assert response.json()["active"] is False


async def test_legacy_delete_requires_finalized(client: AsyncClient):
    created = await _create(client)

    response = await client.delete(f"/projects/{created['id']}")

    assert response.status_code == 409


async def test_unknown_project_is_404(client: AsyncClient):
    missing = uuid4()

    for response in (
        await client.get(f"/projects/{missing}"),
        await client.put(f"/projects/{missing}", json={"name": "New"}),
        await client.post(f"/projects/{missing}/archive"),
    ):
        assert response.status_code == 404
        assert response.json()["kind"] == "not_found"


async def test_malformed_id_is_422(client: AsyncClient):
    response = await client.get("/projects/not-a-uuid")

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "project_id"


async def test_empty_update_rejected(client: AsyncClient):
    created = await _create(client)

    response = await client.put(f"/projects/{created['id']}", json={})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "body"


async def test_unknown_status_filter_rejected(client: AsyncClient):
    response = await client.get("/projects", params={"status": "deleted"})

    assert response.status_code == 422
