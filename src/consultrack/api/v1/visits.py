"""Visit endpoints."""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Query, status

from src.consultrack.api.dependencies import VisitServiceDep
from src.consultrack.models import RecordStatus
from src.consultrack.schemas import VisitRead

router = APIRouter(prefix="/visits", tags=["visits"])

RawBody = Annotated[
    dict[str, Any],
    Body(
        examples=[
            {
                "producto": "Data Platform",
                "clientName": "Acme",
                "numeroOportunidad": "OP-1042",
                "tiempo": "1,5",
                "fecha": "05/03/2024",
                "valorOportunidad": "12.500,00",
            }
        ]
    ),
]

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"description": "Visit not found"},
    422: {"description": "Validation failed; `errors` lists every failing field"},
    503: {"description": "Record store unavailable"},
}


@router.get(
    "",
    response_model=list[VisitRead],
    summary="List visits",
    description="List active (default) or deleted visits, newest first.",
)
async def list_visits(
    service: VisitServiceDep,
    status_filter: Annotated[
        RecordStatus, Query(alias="status", description="active or archived")
    ] = RecordStatus.ACTIVE,
) -> list[VisitRead]:
    visits = await service.list_visits(status_filter)
    return [VisitRead.model_validate(v) for v in visits]


@router.post(
    "",
    response_model=VisitRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record visit",
    responses={201: {"description": "Visit recorded"}, **ERROR_RESPONSES},
)
async def create_visit(payload: RawBody, service: VisitServiceDep) -> VisitRead:
    visit = await service.create_visit(payload)
    return VisitRead.model_validate(visit)


@router.get("/{visit_id}", response_model=VisitRead, summary="Get visit", responses=ERROR_RESPONSES)
async def get_visit(visit_id: UUID, service: VisitServiceDep) -> VisitRead:
    visit = await service.get_visit(visit_id)
    return VisitRead.model_validate(visit)


@router.put(
    "/{visit_id}",
    response_model=VisitRead,
    summary="Update visit",
    description="Partial update: only the fields sent are changed.",
    responses=ERROR_RESPONSES,
)
async def update_visit(visit_id: UUID, payload: RawBody, service: VisitServiceDep) -> VisitRead:
    visit = await service.update_visit(visit_id, payload)
    return VisitRead.model_validate(visit)


@router.delete(
    "/{visit_id}",
    response_model=VisitRead,
    summary="Delete visit",
    description="Soft-delete: the visit is kept with active=false. Idempotent.",
    responses=ERROR_RESPONSES,
)
async def delete_visit(visit_id: UUID, service: VisitServiceDep) -> VisitRead:
    visit = await service.delete_visit(visit_id)
    return VisitRead.model_validate(visit)
