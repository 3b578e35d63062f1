"""Pydantic schemas for education API endpoints."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from portfolio_cms.api.schemas.common import NonEmptyStr, OptionalAssetUrl


class EducationRequest(BaseModel):
    """Request schema for creating or replacing an education entry."""

    institution: NonEmptyStr = Field(..., description="School or university name")
    degree: NonEmptyStr = Field(..., description="Degree type (e.g., Bachelor of Science)")
    field_of_study: str | None = Field(None, description="Major or field of study")
    location: str | None = Field(None, description="Campus location")
    start_date: date = Field(..., description="Start date (ISO format)")
    end_date: date | None = Field(None, description="End date (ISO format, empty if current)")
    is_current: bool = Field(False, description="Whether currently enrolled")
    description: str | None = Field(None, description="Highlights, coursework, honors")
    logo_url: OptionalAssetUrl = Field(None, description="Logo URL or site path")
    order: int | None = Field(None, description="Display position; appended last when omitted")


class EducationResponse(BaseModel):
    """Response schema for education data."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    institution: str
    degree: str
    field_of_study: str | None = None
    location: str | None = None
    start_date: date
    end_date: date | None = None
    is_current: bool = False
    description: str | None = None
    logo_url: str | None = None
    order: int
    created_at: datetime
    updated_at: datetime
