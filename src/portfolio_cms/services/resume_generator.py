"""Resume rendering service.

Loads a stored resume into a :class:`ResumeDocument` and renders it with
the LaTeX template the resume names. Only visible sections whose content
decodes are rendered, in ``order``.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from pylatex.errors import CompilerError

from portfolio_cms.services.errors import RenderError
from portfolio_cms.services.resume import get_resume
from portfolio_cms.templates import get_template

if TYPE_CHECKING:
    from pylatex import Document

    from portfolio_cms.services.resume_data import RenderSection, ResumeDocument

logger = logging.getLogger(__name__)

__all__ = [
    "build_resume_document",
    "generate_resume_pdf",
    "generate_resume_tex",
    "load_resume_document",
]


def load_resume_document(resume_id: int) -> ResumeDocument:
    """Fetch a resume and keep only its renderable sections.

    Raises:
        NotFoundError: If the resume does not exist.
    """
    resume = get_resume(resume_id)

    sections: list[RenderSection] = []
    for section in resume["sections"]:
        if not section["is_visible"]:
            continue
        if section["content_status"] != "ok":
            logger.warning(
                "Skipping unparseable %s section %d of resume %d",
                section["kind"],
                section["id"],
                resume_id,
            )
            continue
        sections.append(
            {"kind": section["kind"], "title": section["title"], "content": section["content"]}
        )

    return {
        "title": resume["title"],
        "template": resume["template"],
        "theme": resume["theme"],
        "font_family": resume["font_family"],
        "font_size": resume["font_size"],
        "spacing": resume["spacing"],
        "sections": sections,
    }


def build_resume_document(resume_id: int) -> Document:
    """Build the PyLaTeX ``Document`` for a stored resume.

    Raises:
        NotFoundError: If the resume does not exist.
        RenderError: If the resume names an unregistered template.
    """
    data = load_resume_document(resume_id)
    try:
        template = get_template(data["template"])
    except ValueError as exc:
        raise RenderError(str(exc)) from exc
    return template.build(data)


def generate_resume_tex(resume_id: int) -> str:
    """Generate the LaTeX source for a resume.

    Args:
        resume_id: Stored resume identifier.

    Returns:
        The full ``.tex`` source as a string.
    """
    return build_resume_document(resume_id).dumps()


def generate_resume_pdf(
    resume_id: int,
    output_path: Path,
    *,
    compiler: str = "pdflatex",
) -> Path:
    """Generate a PDF resume via LaTeX compilation.

    Requires *compiler* (``pdflatex`` or ``latexmk``) to be installed
    on the system.

    Args:
        resume_id: Stored resume identifier.
        output_path: Desired output file path **without** extension.
        compiler: LaTeX compiler to invoke.

    Returns:
        The ``Path`` of the generated ``.pdf``.

    Raises:
        NotFoundError: If the resume does not exist.
        RenderError: If the compiler is missing or fails.
    """
    doc = build_resume_document(resume_id)

    try:
        # PyLaTeX appends .pdf/.tex automatically
        doc.generate_pdf(
            str(output_path),
            clean_tex=False,
            compiler=compiler,
        )
    except (CompilerError, subprocess.CalledProcessError, OSError) as exc:
        logger.exception("LaTeX compilation failed for resume %d", resume_id)
        raise RenderError(f"Could not compile resume {resume_id} with {compiler}") from exc

    return Path(f"{output_path}.pdf")
