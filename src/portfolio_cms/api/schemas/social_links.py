"""Pydantic schemas for social link API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from portfolio_cms.api.schemas.common import NonEmptyStr, OptionalAssetUrl, WebUrl


class SocialLinkRequest(BaseModel):
    """Request schema for creating or replacing a social link."""

    platform: NonEmptyStr = Field(..., description="Platform name (e.g., GitHub)")
    url: WebUrl = Field(..., description="Profile URL")
    icon_url: OptionalAssetUrl = Field(None, description="Icon URL or site path")
    is_active: bool = Field(True, description="Whether the link is shown on the site")
    order: int | None = Field(None, description="Display position; appended last when omitted")


class SocialLinkResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    platform: str
    url: str
    icon_url: str | None = None
    is_active: bool
    order: int
    created_at: datetime
    updated_at: datetime
