"""Skill routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.schemas.common import ReorderRequest
from portfolio_cms.api.schemas.skills import SkillRequest, SkillResponse
from portfolio_cms.services.records import skills

router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("", response_model=list[SkillResponse])
def list_skills() -> list[SkillResponse]:
    """List all skills in display order."""
    return [SkillResponse(**r) for r in skills.list_all()]


@router.post(
    "",
    response_model=SkillResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_skill(data: SkillRequest) -> SkillResponse:
    """Create a skill."""
    return SkillResponse(**skills.create(data.model_dump()))


# --- /order MUST come before /{skill_id} to avoid path conflicts ---


@router.put(
    "/order",
    response_model=list[SkillResponse],
    dependencies=[Depends(require_admin)],
)
def reorder_skills(data: ReorderRequest) -> list[SkillResponse]:
    """Rewrite the order of every skill from the submitted id list."""
    return [SkillResponse(**r) for r in skills.reorder(data.ids)]


@router.put(
    "/{skill_id}",
    response_model=SkillResponse,
    dependencies=[Depends(require_admin)],
)
def update_skill(
    skill_id: Annotated[int, Path(description="Skill ID")],
    data: SkillRequest,
) -> SkillResponse:
    """Replace a skill."""
    return SkillResponse(**skills.update(skill_id, data.model_dump()))


@router.delete(
    "/{skill_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_skill(skill_id: Annotated[int, Path(description="Skill ID")]) -> None:
    """Delete a skill."""
    skills.delete(skill_id)
