"""Social link routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.schemas.social_links import SocialLinkRequest, SocialLinkResponse
from portfolio_cms.services.records import social_links

router = APIRouter(prefix="/social-links", tags=["social_links"])


@router.get("", response_model=list[SocialLinkResponse])
def list_social_links() -> list[SocialLinkResponse]:
    """List all social links in display order."""
    return [SocialLinkResponse(**r) for r in social_links.list_all()]


@router.post(
    "",
    response_model=SocialLinkResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_social_link(data: SocialLinkRequest) -> SocialLinkResponse:
    return SocialLinkResponse(**social_links.create(data.model_dump()))


@router.put(
    "/{link_id}",
    response_model=SocialLinkResponse,
    dependencies=[Depends(require_admin)],
)
def update_social_link(
    link_id: Annotated[int, Path(description="Social link ID")],
    data: SocialLinkRequest,
) -> SocialLinkResponse:
    """Replace every field of a social link."""
    return SocialLinkResponse(**social_links.update(link_id, data.model_dump()))


@router.delete(
    "/{link_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_social_link(link_id: Annotated[int, Path(description="Social link ID")]) -> None:
    social_links.delete(link_id)
