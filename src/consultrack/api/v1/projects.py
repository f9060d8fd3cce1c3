"""Project endpoints.

Request bodies are taken as raw JSON objects: field aliases, locale numbers
and date formats are resolved by the service layer, not by FastAPI.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Query, status

from src.consultrack.api.dependencies import ProjectServiceDep
from src.consultrack.models import RecordStatus
from src.consultrack.schemas import ProjectRead

router = APIRouter(prefix="/projects", tags=["projects"])

RawBody = Annotated[
    dict[str, Any],
    Body(
        examples=[
            {
                "name": "Cloud Migration",
                "country": "Chile",
                "consultant": "Juan Pérez",
                "plannedHours": "40",
                "hourlyRate": "50,5",
            }
        ]
    ),
]

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"description": "Project not found"},
    422: {"description": "Validation failed; `errors` lists every failing field"},
    503: {"description": "Record store unavailable"},
}


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List active (default) or archived projects, newest first.",
)
async def list_projects(
    service: ProjectServiceDep,
    status_filter: Annotated[
        RecordStatus, Query(alias="status", description="active or archived")
    ] = RecordStatus.ACTIVE,
) -> list[ProjectRead]:
    projects = await service.list_projects(status_filter)
    return [ProjectRead.model_validate(p) for p in projects]


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={201: {"description": "Project created"}, **ERROR_RESPONSES},
)
async def create_project(payload: RawBody, service: ProjectServiceDep) -> ProjectRead:
    project = await service.create_project(payload)
    return ProjectRead.model_validate(project)


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    description="Fetch one project. Archived projects remain retrievable.",
    responses=ERROR_RESPONSES,
)
async def get_project(project_id: UUID, service: ProjectServiceDep) -> ProjectRead:
    project = await service.get_project(project_id)
    return ProjectRead.model_validate(project)


@router.put(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    description="Partial update: only the fields sent are changed.",
    responses=ERROR_RESPONSES,
)
async def update_project(
    project_id: UUID, payload: RawBody, service: ProjectServiceDep
) -> ProjectRead:
    project = await service.update_project(project_id, payload)
    return ProjectRead.model_validate(project)


@router.post(
    "/{project_id}/archive",
    response_model=ProjectRead,
    summary="Archive project",
    description="Soft-delete a finalized project. Archiving twice is allowed.",
    responses={409: {"description": "Project is not finalized"}, **ERROR_RESPONSES},
)
async def archive_project(project_id: UUID, service: ProjectServiceDep) -> ProjectRead:
    project = await service.archive_project(project_id)
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Archive project (legacy)",
    description="Same as POST /projects/{id}/archive, kept for older clients.",
    responses={409: {"description": "Project is not finalized"}, **ERROR_RESPONSES},
)
async def delete_project(project_id: UUID, service: ProjectServiceDep) -> ProjectRead:
    project = await service.archive_project(project_id)
    return ProjectRead.model_validate(project)
