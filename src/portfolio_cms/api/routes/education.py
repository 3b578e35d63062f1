"""Education routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.schemas.education import EducationRequest, EducationResponse
from portfolio_cms.services.records import education

router = APIRouter(prefix="/education", tags=["education"])


@router.get("", response_model=list[EducationResponse])
def list_education() -> list[EducationResponse]:
    """List all education entries in display order."""
    return [EducationResponse(**r) for r in education.list_all()]


@router.post(
    "",
    response_model=EducationResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_education(data: EducationRequest) -> EducationResponse:
    return EducationResponse(**education.create(data.model_dump()))


@router.put(
    "/{education_id}",
    response_model=EducationResponse,
    dependencies=[Depends(require_admin)],
)
def update_education(
    education_id: Annotated[int, Path(description="Education ID")],
    data: EducationRequest,
) -> EducationResponse:
    """Replace every field of an education entry."""
    return EducationResponse(**education.update(education_id, data.model_dump()))


@router.delete(
    "/{education_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_education(education_id: Annotated[int, Path(description="Education ID")]) -> None:
    education.delete(education_id)
