"""Experience and position routes for the API.

Positions live under their experience:
``/experiences/{experience_id}/positions/{position_id}``.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.schemas.common import ReorderRequest
from portfolio_cms.api.schemas.experiences import (
    ExperienceCreateRequest,
    ExperienceRequest,
    ExperienceResponse,
    PositionRequest,
    PositionResponse,
)
from portfolio_cms.services import experience as experience_service

router = APIRouter(prefix="/experiences", tags=["experiences"])

ExperienceId = Annotated[int, Path(description="Experience ID")]
PositionId = Annotated[int, Path(description="Position ID")]


@router.get("", response_model=list[ExperienceResponse])
def list_experiences() -> list[ExperienceResponse]:
    """List all experiences with their positions, in display order."""
    return [ExperienceResponse(**r) for r in experience_service.list_experiences()]


@router.post(
    "",
    response_model=ExperienceResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_experience(data: ExperienceCreateRequest) -> ExperienceResponse:
    """Create an experience, optionally with its initial positions."""
    return ExperienceResponse(**experience_service.create_experience(data.model_dump()))


# --- /current and /order MUST come before /{experience_id} ---


@router.get("/current", response_model=list[ExperienceResponse])
def list_current_experiences() -> list[ExperienceResponse]:
    """List experiences that have a current position, with only those positions."""
    return [ExperienceResponse(**r) for r in experience_service.list_current_experiences()]


@router.put(
    "/order",
    response_model=list[ExperienceResponse],
    dependencies=[Depends(require_admin)],
)
def reorder_experiences(data: ReorderRequest) -> list[ExperienceResponse]:
    return [ExperienceResponse(**r) for r in experience_service.reorder_experiences(data.ids)]


@router.get("/{experience_id}", response_model=ExperienceResponse)
def get_experience(experience_id: ExperienceId) -> ExperienceResponse:
    return ExperienceResponse(**experience_service.get_experience(experience_id))


@router.put(
    "/{experience_id}",
    response_model=ExperienceResponse,
    dependencies=[Depends(require_admin)],
)
def update_experience(experience_id: ExperienceId, data: ExperienceRequest) -> ExperienceResponse:
    """Replace an experience's own fields. Positions are edited separately."""
    return ExperienceResponse(
        **experience_service.update_experience(experience_id, data.model_dump())
    )


@router.delete(
    "/{experience_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_experience(experience_id: ExperienceId) -> None:
    """Delete an experience and all of its positions."""
    experience_service.delete_experience(experience_id)


# -- positions ----------------------------------------------------------------


@router.get("/{experience_id}/positions", response_model=list[PositionResponse])
def list_positions(experience_id: ExperienceId) -> list[PositionResponse]:
    return [PositionResponse(**r) for r in experience_service.list_positions(experience_id)]


@router.post(
    "/{experience_id}/positions",
    response_model=PositionResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_position(experience_id: ExperienceId, data: PositionRequest) -> PositionResponse:
    """Add a position to an experience."""
    return PositionResponse(
        **experience_service.create_position(experience_id, data.model_dump())
    )


@router.put(
    "/{experience_id}/positions/order",
    response_model=list[PositionResponse],
    dependencies=[Depends(require_admin)],
)
def reorder_positions(experience_id: ExperienceId, data: ReorderRequest) -> list[PositionResponse]:
    """Rewrite the order of one experience's positions."""
    return [
        PositionResponse(**r)
        for r in experience_service.reorder_positions(experience_id, data.ids)
    ]


@router.get("/{experience_id}/positions/{position_id}", response_model=PositionResponse)
def get_position(experience_id: ExperienceId, position_id: PositionId) -> PositionResponse:
    return PositionResponse(**experience_service.get_position(experience_id, position_id))


@router.put(
    "/{experience_id}/positions/{position_id}",
    response_model=PositionResponse,
    dependencies=[Depends(require_admin)],
)
def update_position(
    experience_id: ExperienceId,
    position_id: PositionId,
    data: PositionRequest,
) -> PositionResponse:
    """Replace a position's fields."""
    return PositionResponse(
        **experience_service.update_position(experience_id, position_id, data.model_dump())
    )


@router.delete(
    "/{experience_id}/positions/{position_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_position(experience_id: ExperienceId, position_id: PositionId) -> None:
    experience_service.delete_position(experience_id, position_id)
