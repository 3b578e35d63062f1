"""Routes for the singleton site content: overview, about and settings.

``GET`` returns ``{}`` until the record has been saved once. ``POST`` and
``PUT`` are both upserts into the single stored row.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.schemas.site import (
    AboutRequest,
    AboutResponse,
    OverviewRequest,
    OverviewResponse,
    SettingsRequest,
    SettingsResponse,
)
from portfolio_cms.services import singletons

router = APIRouter(tags=["site"])


# -- overview ---------------------------------------------------------------


@router.get("/overview", response_model=OverviewResponse | dict[str, Any])
def get_overview() -> OverviewResponse | dict[str, Any]:
    """Get the overview, or ``{}`` when none has been saved."""
    result = singletons.overview.get()
    return OverviewResponse(**result) if result else {}


@router.post("/overview", response_model=OverviewResponse, dependencies=[Depends(require_admin)])
@router.put("/overview", response_model=OverviewResponse, dependencies=[Depends(require_admin)])
def save_overview(data: OverviewRequest) -> OverviewResponse:
    """Create or replace the overview."""
    return OverviewResponse(**singletons.overview.save(data.model_dump()))


# -- about ------------------------------------------------------------------


@router.get("/about", response_model=AboutResponse | dict[str, Any])
def get_about() -> AboutResponse | dict[str, Any]:
    """Get the about page, or ``{}`` when none has been saved."""
    result = singletons.about.get()
    return AboutResponse(**result) if result else {}


@router.post("/about", response_model=AboutResponse, dependencies=[Depends(require_admin)])
@router.put("/about", response_model=AboutResponse, dependencies=[Depends(require_admin)])
def save_about(data: AboutRequest) -> AboutResponse:
    """Create or replace the about page."""
    return AboutResponse(**singletons.about.save(data.model_dump()))


# -- settings ---------------------------------------------------------------


@router.get("/settings", response_model=SettingsResponse | dict[str, Any])
def get_settings() -> SettingsResponse | dict[str, Any]:
    """Get site settings, or ``{}`` when none have been saved."""
    result = singletons.site_settings.get()
    return SettingsResponse(**result) if result else {}


@router.post("/settings", response_model=SettingsResponse, dependencies=[Depends(require_admin)])
@router.put("/settings", response_model=SettingsResponse, dependencies=[Depends(require_admin)])
def save_settings(data: SettingsRequest) -> SettingsResponse:
    """Create or replace site settings."""
    return SettingsResponse(**singletons.site_settings.save(data.model_dump()))
