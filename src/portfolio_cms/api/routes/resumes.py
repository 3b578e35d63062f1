"""Resume routes for the API.

Every resume endpoint, reads included, requires an admin identity.
"""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, status
from fastapi import Path as PathParam
from fastapi.responses import FileResponse, PlainTextResponse

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.schemas.resumes import (
    ResumeFromPortfolioRequest,
    ResumeRequest,
    ResumeResponse,
)
from portfolio_cms.services.errors import PortfolioError
from portfolio_cms.services.resume import (
    create_resume,
    delete_resume,
    get_resume,
    list_resumes,
    replace_resume,
)
from portfolio_cms.services.resume_builder import create_resume_from_portfolio
from portfolio_cms.services.resume_generator import generate_resume_pdf, generate_resume_tex

router = APIRouter(prefix="/resumes", tags=["resumes"], dependencies=[Depends(require_admin)])

ResumeId = Annotated[int, PathParam(description="Resume ID")]


@router.get("", response_model=list[ResumeResponse])
def list_resumes_endpoint() -> list[ResumeResponse]:
    """List all resumes, most recently updated first."""
    return [ResumeResponse(**r) for r in list_resumes()]


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
def create_resume_endpoint(data: ResumeRequest) -> ResumeResponse:
    """Create a resume with its complete section list."""
    return ResumeResponse(**create_resume(data.model_dump(mode="json")))


# --- /from-portfolio MUST come before /{resume_id} to avoid path conflicts ---


@router.post(
    "/from-portfolio",
    response_model=ResumeResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_resume_from_portfolio_endpoint(data: ResumeFromPortfolioRequest) -> ResumeResponse:
    """Create a resume pre-populated from the stored portfolio content."""
    style = data.model_dump(include={"template", "theme", "font_family", "font_size", "spacing"})
    return ResumeResponse(**create_resume_from_portfolio(data.title, style, data.include))


@router.get("/{resume_id}", response_model=ResumeResponse)
def get_resume_endpoint(resume_id: ResumeId) -> ResumeResponse:
    return ResumeResponse(**get_resume(resume_id))


@router.put("/{resume_id}", response_model=ResumeResponse)
def replace_resume_endpoint(resume_id: ResumeId, data: ResumeRequest) -> ResumeResponse:
    """Replace a resume. Sections missing from the body are deleted."""
    return ResumeResponse(**replace_resume(resume_id, data.model_dump(mode="json")))


@router.delete("/{resume_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_resume_endpoint(resume_id: ResumeId) -> None:
    """Delete a resume and its sections."""
    delete_resume(resume_id)


@router.get(
    "/{resume_id}/tex",
    response_class=PlainTextResponse,
    responses={200: {"content": {"application/x-tex": {}}}},
)
def get_resume_tex(resume_id: ResumeId) -> PlainTextResponse:
    """Return the LaTeX source of the resume's visible sections."""
    return PlainTextResponse(generate_resume_tex(resume_id), media_type="application/x-tex")


@router.get(
    "/{resume_id}/pdf",
    responses={200: {"content": {"application/pdf": {}}}},
)
def get_resume_pdf(resume_id: ResumeId, background_tasks: BackgroundTasks) -> FileResponse:
    """Compile and download the resume as PDF (requires a LaTeX compiler)."""
    tmp_dir = tempfile.mkdtemp()
    try:
        pdf_path = generate_resume_pdf(resume_id, Path(tmp_dir) / f"resume_{resume_id}")
    except PortfolioError:
        shutil.rmtree(tmp_dir, ignore_errors=True)
        raise

    background_tasks.add_task(shutil.rmtree, tmp_dir, True)
    return FileResponse(
        path=str(pdf_path),
        media_type="application/pdf",
        filename=f"resume_{resume_id}.pdf",
    )
