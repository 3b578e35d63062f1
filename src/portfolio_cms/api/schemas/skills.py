"""Pydantic schemas for skill API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from portfolio_cms.api.schemas.common import NonEmptyStr, OptionalAssetUrl


class SkillRequest(BaseModel):
    """Request schema for creating or replacing a skill."""

    name: NonEmptyStr = Field(..., description="Skill name (e.g., Python)")
    category: NonEmptyStr = Field(..., description="Grouping shown on the site (e.g., Languages)")
    icon_url: OptionalAssetUrl = Field(None, description="Icon URL or site path")
    level: int = Field(3, ge=1, le=5, description="Proficiency from 1 to 5")
    order: int | None = Field(None, description="Display position; appended last when omitted")


class SkillResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    icon_url: str | None = None
    level: int
    order: int
    created_at: datetime
    updated_at: datetime
