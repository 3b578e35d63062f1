"""Award routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.schemas.achievements import AwardRequest, AwardResponse
from portfolio_cms.services.records import awards

router = APIRouter(prefix="/awards", tags=["awards"])


@router.get("", response_model=list[AwardResponse])
def list_awards() -> list[AwardResponse]:
    """List all awards in display order."""
    return [AwardResponse(**r) for r in awards.list_all()]


@router.post(
    "",
    response_model=AwardResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_award(data: AwardRequest) -> AwardResponse:
    return AwardResponse(**awards.create(data.model_dump()))


@router.put(
    "/{award_id}",
    response_model=AwardResponse,
    dependencies=[Depends(require_admin)],
)
def update_award(
    award_id: Annotated[int, Path(description="Award ID")],
    data: AwardRequest,
) -> AwardResponse:
    """Replace every field of an award."""
    return AwardResponse(**awards.update(award_id, data.model_dump()))


@router.delete(
    "/{award_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_award(award_id: Annotated[int, Path(description="Award ID")]) -> None:
    awards.delete(award_id)
