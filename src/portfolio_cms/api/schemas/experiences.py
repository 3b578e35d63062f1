"""Pydantic schemas for experience and position API endpoints."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from portfolio_cms.api.schemas.common import NonEmptyStr, OptionalAssetUrl


class PositionRequest(BaseModel):
    """Request schema for creating or replacing a position."""

    title: NonEmptyStr = Field(..., description="Job title held")
    start_date: date = Field(..., description="Start date (ISO format)")
    end_date: date | None = Field(None, description="End date (ISO format, empty if current)")
    is_current: bool = Field(False, description="Whether this position is held now")
    description: str | None = Field(None, description="Responsibilities and achievements")
    year: str | None = Field(None, description="Display label for the period (e.g., 2022 - Now)")
    employment_type: str | None = Field(None, description="Full-time, Contract, Internship, ...")
    icon: str | None = Field(None, description="Icon name shown next to the position")
    skills: list[str] = Field(default_factory=list, description="Skills used in this position")
    order: int | None = Field(None, description="Display position; appended last when omitted")


class PositionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    experience_id: int
    title: str
    start_date: date
    end_date: date | None = None
    is_current: bool = False
    description: str | None = None
    year: str | None = None
    employment_type: str | None = None
    icon: str | None = None
    skills: list[str] = []
    order: int
    created_at: datetime
    updated_at: datetime


class ExperienceRequest(BaseModel):
    """Request schema for replacing an experience's own fields."""

    company: NonEmptyStr = Field(..., description="Company or organization name")
    location: str | None = Field(None, description="Office location")
    description: str | None = Field(None, description="What the company does")
    logo_url: OptionalAssetUrl = Field(None, description="Logo URL or site path")
    order: int | None = Field(None, description="Display position; appended last when omitted")


class ExperienceCreateRequest(ExperienceRequest):
    """Request schema for creating an experience, optionally with positions."""

    positions: list[PositionRequest] = Field(
        default_factory=list, description="Initial positions, in display order"
    )


class ExperienceResponse(BaseModel):
    """Response schema for an experience with its positions."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    company: str
    location: str | None = None
    description: str | None = None
    logo_url: str | None = None
    order: int
    is_current: bool = Field(False, description="True when any position is current")
    positions: list[PositionResponse] = []
    created_at: datetime
    updated_at: datetime
