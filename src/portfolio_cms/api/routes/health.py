"""Liveness check for the portfolio CMS, served outside ``/api``."""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    """Report that the process is up; does not touch the database."""
    return {"status": "healthy"}
