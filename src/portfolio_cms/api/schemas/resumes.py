"""Pydantic schemas for resume API endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from portfolio_cms.services.section_content import SectionKind

TemplateName = Literal["modern", "classic", "minimal"]
ThemeName = Literal["light", "dark"]
FontSize = Literal["small", "medium", "large"]
Spacing = Literal["compact", "normal", "spacious"]


class SectionRequest(BaseModel):
    """One section of a resume; its position in the list is its order."""

    kind: SectionKind = Field(..., description="Content shape of the section")
    title: str = Field("", description="Heading; a default per kind is used when blank")
    content: Any = Field(..., description="Kind-dependent JSON content")
    is_visible: bool = Field(True, description="Hidden sections are kept but not rendered")


class ResumeStyle(BaseModel):
    template: TemplateName = Field("modern", description="Layout template")
    theme: ThemeName = Field("light", description="Color theme")
    font_family: str = Field("inter", description="Preferred font family")
    font_size: FontSize = Field("medium", description="Base font size")
    spacing: Spacing = Field("normal", description="Vertical spacing")


class ResumeRequest(ResumeStyle):
    """Request schema for creating or fully replacing a resume."""

    title: str = Field(..., description="Resume name")
    sections: list[SectionRequest] = Field(
        default_factory=list, description="Complete section list, in display order"
    )


class ResumeFromPortfolioRequest(ResumeStyle):
    """Request schema for building a resume from the stored portfolio."""

    title: str = Field(..., description="Resume name")
    include: list[SectionKind] | None = Field(
        None, description="Section kinds to build; every kind when omitted"
    )


class SectionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    resume_id: int
    kind: str
    title: str
    content: Any
    content_status: Literal["ok", "unparseable"] = Field(
        "ok", description="'unparseable' when content is the raw stored text"
    )
    order: int
    is_visible: bool


class ResumeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    template: str
    theme: str
    font_family: str
    font_size: str
    spacing: str
    sections: list[SectionResponse] = []
    created_at: datetime
    updated_at: datetime
