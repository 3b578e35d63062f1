"""Certification routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.schemas.achievements import CertificationRequest, CertificationResponse
from portfolio_cms.services.records import certifications

router = APIRouter(prefix="/certifications", tags=["certifications"])


@router.get("", response_model=list[CertificationResponse])
def list_certifications() -> list[CertificationResponse]:
    """List all certifications in display order."""
    return [CertificationResponse(**r) for r in certifications.list_all()]


@router.post(
    "",
    response_model=CertificationResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_certification(data: CertificationRequest) -> CertificationResponse:
    return CertificationResponse(**certifications.create(data.model_dump()))


@router.put(
    "/{certification_id}",
    response_model=CertificationResponse,
    dependencies=[Depends(require_admin)],
)
def update_certification(
    certification_id: Annotated[int, Path(description="Certification ID")],
    data: CertificationRequest,
) -> CertificationResponse:
    """Replace every field of a certification."""
    return CertificationResponse(**certifications.update(certification_id, data.model_dump()))


@router.delete(
    "/{certification_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_certification(
    certification_id: Annotated[int, Path(description="Certification ID")],
) -> None:
    certifications.delete(certification_id)
