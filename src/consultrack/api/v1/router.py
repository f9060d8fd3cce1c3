from fastapi import APIRouter

from src.consultrack.api.v1 import projects, visits


def build_api_router(prefix: str = "") -> APIRouter:
    """Group the record routers under the configured prefix ("" or e.g. "/api")."""
    api_router = APIRouter(prefix=prefix)
    api_router.include_router(projects.router)
    api_router.include_router(visits.router)
    return api_router
