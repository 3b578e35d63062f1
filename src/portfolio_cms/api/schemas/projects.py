"""Pydantic schemas for project API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from portfolio_cms.api.schemas.common import NonEmptyStr, OptionalAssetUrl, OptionalWebUrl


class ProjectRequest(BaseModel):
    """Request schema for creating or replacing a project."""

    title: NonEmptyStr = Field(..., description="Project name")
    description: str = Field("", description="One-paragraph summary")
    content: str | None = Field(None, description="Markdown case study")
    image_url: OptionalAssetUrl = Field(None, description="Cover image URL or site path")
    github_url: OptionalWebUrl = Field(None, description="Source repository URL")
    live_url: OptionalWebUrl = Field(None, description="Deployed demo URL")
    technologies: list[str] = Field(default_factory=list, description="Tech stack tags")
    featured: bool = Field(False, description="Whether the project is highlighted")
    order: int | None = Field(None, description="Display position; appended last when omitted")


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    content: str | None = None
    image_url: str | None = None
    github_url: str | None = None
    live_url: str | None = None
    technologies: list[str] = []
    featured: bool = False
    order: int
    created_at: datetime
    updated_at: datetime
