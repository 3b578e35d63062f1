"""Pydantic schemas for the singleton site content: overview, about, settings."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from portfolio_cms.api.schemas.common import NonEmptyStr, OptionalAssetUrl, OptionalWebUrl


class OverviewRequest(BaseModel):
    """Request schema for saving the overview (full replace)."""

    first_name: NonEmptyStr = Field(..., description="Given name")
    last_name: NonEmptyStr = Field(..., description="Family name")
    display_name: str | None = Field(None, description="Name shown in the site header")
    username: str | None = Field(None, description="Handle used in links")
    gender: str | None = Field(None, description="Used for pronouns on the site")
    bio: str | None = Field(None, description="Short biography")
    flip_sentences: list[str] = Field(
        default_factory=list, description="Rotating taglines shown under the name"
    )
    address: str | None = Field(None, description="City / region")
    phone_number: str | None = Field(None, description="Contact phone number")
    email: str | None = Field(None, description="Contact email")
    website: OptionalWebUrl = Field(None, description="Personal website")
    other_websites: list[str] = Field(default_factory=list, description="Additional sites")
    date_of_birth: str | None = Field(None, description="Date of birth (free text)")
    job_title: str | None = Field(None, description="Current job title")
    avatar: OptionalAssetUrl = Field(None, description="Avatar image URL or site path")
    og_image: OptionalAssetUrl = Field(None, description="Open Graph image URL or site path")
    keywords: list[str] = Field(default_factory=list, description="SEO keywords")
    date_created: str | None = Field(None, description="Site creation date (free text)")


class OverviewResponse(OverviewRequest):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AboutRequest(BaseModel):
    """Request schema for saving the about page (full replace)."""

    title: NonEmptyStr = Field(..., description="About page heading")
    description: str | None = Field(None, description="Short summary")
    content: str | None = Field(None, description="Markdown body")
    image_url: OptionalAssetUrl = Field(None, description="Image URL or site path")


class AboutResponse(AboutRequest):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SettingsRequest(BaseModel):
    """Request schema for saving site settings (full replace)."""

    site_title: NonEmptyStr = Field(..., description="Browser/site title")
    site_description: str | None = Field(None, description="Meta description")
    theme: Literal["light", "dark", "system"] = Field("system", description="Default color theme")


class SettingsResponse(SettingsRequest):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
