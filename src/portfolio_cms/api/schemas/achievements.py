"""Pydantic schemas for award and certification API endpoints."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from portfolio_cms.api.schemas.common import NonEmptyStr, OptionalAssetUrl, OptionalWebUrl


class AwardRequest(BaseModel):
    """Request schema for creating or replacing an award."""

    title: NonEmptyStr = Field(..., description="Award name")
    issuer: NonEmptyStr = Field(..., description="Awarding organization")
    date: dt.date = Field(..., description="Date received (ISO format)")
    description: str | None = Field(None, description="What the award recognizes")
    image_url: OptionalAssetUrl = Field(None, description="Image URL or site path")
    url: OptionalWebUrl = Field(None, description="Link to the announcement")
    order: int | None = Field(None, description="Display position; appended last when omitted")


class AwardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    issuer: str
    date: dt.date
    description: str | None = None
    image_url: str | None = None
    url: str | None = None
    order: int
    created_at: dt.datetime
    updated_at: dt.datetime


class CertificationRequest(BaseModel):
    """Request schema for creating or replacing a certification."""

    title: NonEmptyStr = Field(..., description="Certification name")
    issuer: NonEmptyStr = Field(..., description="Issuing organization")
    issue_date: dt.date = Field(..., description="Issue date (ISO format)")
    expiry_date: dt.date | None = Field(None, description="Expiry date, if any")
    credential_id: str | None = Field(None, description="Credential identifier")
    description: str | None = Field(None, description="Scope of the certification")
    image_url: OptionalAssetUrl = Field(None, description="Badge URL or site path")
    url: OptionalWebUrl = Field(None, description="Verification URL")
    order: int | None = Field(None, description="Display position; appended last when omitted")


class CertificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    issuer: str
    issue_date: dt.date
    expiry_date: dt.date | None = None
    credential_id: str | None = None
    description: str | None = None
    image_url: str | None = None
    url: str | None = None
    order: int
    created_at: dt.datetime
    updated_at: dt.datetime
