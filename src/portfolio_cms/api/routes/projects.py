"""Project routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.schemas.projects import ProjectRequest, ProjectResponse
from portfolio_cms.services.records import projects

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=list[ProjectResponse])
def list_projects() -> list[ProjectResponse]:
    """List all projects in display order."""
    return [ProjectResponse(**r) for r in projects.list_all()]


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_project(data: ProjectRequest) -> ProjectResponse:
    return ProjectResponse(**projects.create(data.model_dump()))


@router.put(
    "/{project_id}",
    response_model=ProjectResponse,
    dependencies=[Depends(require_admin)],
)
def update_project(
    project_id: Annotated[int, Path(description="Project ID")],
    data: ProjectRequest,
) -> ProjectResponse:
    """Replace every field of a project."""
    return ProjectResponse(**projects.update(project_id, data.model_dump()))


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_project(project_id: Annotated[int, Path(description="Project ID")]) -> None:
    projects.delete(project_id)
