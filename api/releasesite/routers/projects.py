"""Project API routes.

The web app renders the project grid from GET /api/projects and each
project header from GET /api/projects/{slug}.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from releasesite.models.error import ErrorDetail
from releasesite.models.project import Project, ProjectCreate, ProjectUpdate
from releasesite.services import project_service

router = APIRouter()


@router.post(
    "/projects",
    response_model=Project,
    status_code=201,
    responses={409: {"model": ErrorDetail}},
)
async def create_project(data: ProjectCreate) -> Project:
    return project_service.create_project(data)


@router.get("/projects", response_model=list[Project])
async def list_projects(featured: bool = Query(False)) -> list[Project]:
    """Featured projects first, newest first within each group.

    With ?featured=true only featured projects are listed, newest first.
    """
    if featured:
        return project_service.get_featured_projects()
    return project_service.get_projects()


@router.get(
    "/projects/{slug}",
    response_model=Project,
    responses={404: {"model": ErrorDetail}},
)
async def get_project(slug: str) -> Project:
    project = project_service.get_project_by_slug(slug)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.patch(
    "/projects/{project_id}",
    response_model=Project,
    responses={404: {"model": ErrorDetail}, 409: {"model": ErrorDetail}},
)
async def update_project(project_id: int, data: ProjectUpdate) -> Project:
    updated = project_service.update_project(project_id, data)
    if updated is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return updated
