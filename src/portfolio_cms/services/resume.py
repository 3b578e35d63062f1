"""Resume service: resumes and their owned, ordered sections.

Sections are never edited individually. Create and replace both take the
complete section list; a section's ``order`` is its index in that list and
its content is validated for its kind and stored as JSON text.

Reads never fail on bad stored content: a section whose text cannot be
decoded is returned with its raw text and ``content_status="unparseable"``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from portfolio_cms.data.models import Resume, ResumeSection
from portfolio_cms.services.errors import NotFoundError, ValidationError
from portfolio_cms.services.section_content import (
    SectionKind,
    UnparseableContent,
    content_to_json,
    normalize_content,
    parse_content,
    serialize_content,
)
from portfolio_cms.services.store import record_to_dict, store_session

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_SECTION_TITLES",
    "FONT_SIZES",
    "RESUME_DEFAULTS",
    "RESUME_TEMPLATES",
    "SPACINGS",
    "THEMES",
    "create_resume",
    "delete_resume",
    "get_resume",
    "list_resumes",
    "load_section_content",
    "replace_resume",
]

RESUME_TEMPLATES = ("modern", "classic", "minimal")
THEMES = ("light", "dark")
FONT_SIZES = ("small", "medium", "large")
SPACINGS = ("compact", "normal", "spacious")

RESUME_DEFAULTS: dict[str, str] = {
    "template": "modern",
    "theme": "light",
    "font_family": "inter",
    "font_size": "medium",
    "spacing": "normal",
}

DEFAULT_SECTION_TITLES: dict[SectionKind, str] = {
    SectionKind.PERSONAL: "Personal Information",
    SectionKind.EXPERIENCE: "Work Experience",
    SectionKind.EDUCATION: "Education",
    SectionKind.SKILLS: "Skills",
    SectionKind.PROJECTS: "Projects",
}

_CHOICES: dict[str, tuple[str, ...]] = {
    "template": RESUME_TEMPLATES,
    "theme": THEMES,
    "font_size": FONT_SIZES,
    "spacing": SPACINGS,
}


def load_section_content(kind: str, text: str) -> tuple[Any, str]:
    """Decode stored section text for the API.

    Returns:
        ``(content, status)`` where *content* is the normalized JSON
        structure and *status* is ``"ok"``, or the raw text with
        ``"unparseable"``.
    """
    parsed = parse_content(kind, text)
    if isinstance(parsed, UnparseableContent):
        logger.warning("Section content for kind %r is unparseable: %s", kind, parsed.error)
        return parsed.raw, "unparseable"
    return normalize_content(kind, content_to_json(kind, parsed)), "ok"


def _section_to_dict(section: ResumeSection) -> dict[str, Any]:
    data = record_to_dict(section)
    data["content"], data["content_status"] = load_section_content(section.kind, section.content)
    return data


def _resume_to_dict(resume: Resume) -> dict[str, Any]:
    data = record_to_dict(resume)
    data["sections"] = [_section_to_dict(s) for s in sorted(resume.sections, key=lambda s: s.order)]
    return data


def _resume_query():  # noqa: ANN202
    return select(Resume).options(selectinload(Resume.sections))


def _get_resume_or_raise(session: Session, resume_id: int) -> Resume:
    resume = session.scalars(_resume_query().where(Resume.id == resume_id)).first()
    if resume is None:
        raise NotFoundError("Resume", resume_id)
    return resume


def _resolve_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return the resume's scalar fields with defaults filled in.

    Raises:
        ValidationError: If the title is blank or a style value is unknown.
    """
    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Resume title is required")

    fields: dict[str, Any] = {"title": title.strip()}
    for field, default in RESUME_DEFAULTS.items():
        value = data.get(field) or default
        allowed = _CHOICES.get(field)
        if allowed is not None and value not in allowed:
            raise ValidationError(f"Unknown {field} {value!r}. Allowed: {', '.join(allowed)}")
        fields[field] = value
    return fields


def _build_sections(sections: Sequence[Mapping[str, Any]]) -> list[ResumeSection]:
    """Validate *sections* and build unsaved rows with ``order`` = index."""
    built: list[ResumeSection] = []
    for index, section in enumerate(sections):
        kind = section.get("kind")
        content = serialize_content(kind, section.get("content"))
        title = section.get("title")
        if not isinstance(title, str) or not title.strip():
            title = DEFAULT_SECTION_TITLES[SectionKind(kind)]
        built.append(
            ResumeSection(
                kind=SectionKind(kind).value,
                title=title.strip(),
                content=content,
                order=index,
                is_visible=section.get("is_visible") is not False,
            )
        )
    return built


def _prepare(data: Mapping[str, Any]) -> tuple[dict[str, Any], list[ResumeSection]]:
    try:
        return _resolve_fields(data), _build_sections(data.get("sections") or [])
    except ValidationError as exc:
        logger.warning("Rejected resume write: %s", exc.message)
        raise


def create_resume(data: Mapping[str, Any]) -> dict[str, Any]:
    """Create a resume together with its sections.

    Args:
        data: ``title`` (required), the optional style fields ``template``,
            ``theme``, ``font_family``, ``font_size``, ``spacing``, and a
            ``sections`` list of ``{kind, title, content, is_visible}``.

    Returns:
        The stored resume with its sections sorted by order.

    Raises:
        ValidationError: If the title is blank, a style value is unknown, or
            a section's content does not match its kind.
    """
    fields, sections = _prepare(data)

    with store_session("create resume") as session:
        resume = Resume(**fields)
        resume.sections.extend(sections)
        session.add(resume)
        session.flush()
        logger.info("Created resume %d with %d sections", resume.id, len(sections))
        return _resume_to_dict(resume)


def list_resumes() -> list[dict[str, Any]]:
    """Return every resume, most recently updated first."""
    with store_session("list resumes") as session:
        resumes = session.scalars(
            _resume_query().order_by(Resume.updated_at.desc(), Resume.id.desc())
        ).all()
        return [_resume_to_dict(r) for r in resumes]


def get_resume(resume_id: int) -> dict[str, Any]:
    with store_session(f"get resume {resume_id}") as session:
        return _resume_to_dict(_get_resume_or_raise(session, resume_id))


def replace_resume(resume_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
    """Replace a resume's fields and its entire section list.

    Sections omitted from *data* are deleted. The old sections are removed
    and flushed before the new ones are inserted so per-resume ``order``
    values stay unique throughout the transaction.

    Raises:
        NotFoundError: If the resume does not exist.
        ValidationError: Under the same conditions as :func:`create_resume`.
    """
    fields, sections = _prepare(data)

    with store_session(f"replace resume {resume_id}") as session:
        resume = _get_resume_or_raise(session, resume_id)
        for field, value in fields.items():
            setattr(resume, field, value)

        resume.sections.clear()
        session.flush()
        resume.sections.extend(sections)
        resume.updated_at = datetime.now(UTC)
        session.flush()
        logger.info("Replaced resume %d with %d sections", resume_id, len(sections))
        return _resume_to_dict(resume)


def delete_resume(resume_id: int) -> None:
    """Delete a resume and its sections.

    Raises:
        NotFoundError: If the resume does not exist.
    """
    with store_session(f"delete resume {resume_id}") as session:
        resume = _get_resume_or_raise(session, resume_id)
        session.delete(resume)
        logger.info("Deleted resume %d", resume_id)
