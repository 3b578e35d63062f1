"""Pre-populate a resume from the stored portfolio content.

Each section kind maps to one portfolio source:

- ``personal``   <- Overview
- ``experience`` <- every position of every experience (one entry each)
- ``education``  <- Education records
- ``skills``     <- Skills grouped by category, names joined with ``", "``
- ``projects``   <- Projects

Sources with no data are skipped, so the resulting resume never contains an
empty section.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from portfolio_cms.services import experience as experience_service
from portfolio_cms.services import records, singletons
from portfolio_cms.services.errors import ValidationError
from portfolio_cms.services.resume import DEFAULT_SECTION_TITLES, create_resume
from portfolio_cms.services.section_content import SectionKind

__all__ = [
    "build_education_section",
    "build_experience_section",
    "build_personal_section",
    "build_portfolio_sections",
    "build_projects_section",
    "build_skills_section",
    "create_resume_from_portfolio",
]


def _iso(value: Any) -> str | None:
    return value.isoformat() if value is not None else None


def _coerce_kind(kind: SectionKind | str) -> SectionKind:
    try:
        return SectionKind(kind)
    except ValueError:
        raise ValidationError(f"Unknown section kind {kind!r}") from None


def build_personal_section(overview: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if not overview:
        return None
    name = f"{overview.get('first_name') or ''} {overview.get('last_name') or ''}".strip()
    return {
        "name": name,
        "title": overview.get("job_title") or "",
        "email": overview.get("email") or "",
        "phone": overview.get("phone_number") or "",
        "website": overview.get("website") or "",
        "location": overview.get("address") or "",
        "bio": overview.get("bio") or "",
    }


def build_experience_section(experiences: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Flatten experiences into one entry per position, in display order."""
    entries = []
    for experience in experiences:
        for position in experience.get("positions", []):
            entries.append(
                {
                    "company": experience["company"],
                    "position": position["title"],
                    "location": experience.get("location") or "",
                    "start_date": _iso(position.get("start_date")),
                    "end_date": _iso(position.get("end_date")),
                    "is_current": bool(position.get("is_current")),
                    "description": position.get("description") or "",
                }
            )
    return entries


def build_education_section(educations: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    return [
        {
            "institution": edu["institution"],
            "degree": edu.get("degree") or "",
            "field": edu.get("field_of_study") or "",
            "location": edu.get("location") or "",
            "start_date": _iso(edu.get("start_date")),
            "end_date": _iso(edu.get("end_date")),
            "is_current": bool(edu.get("is_current")),
            "description": edu.get("description") or "",
        }
        for edu in educations
    ]


def build_skills_section(skills: Iterable[Mapping[str, Any]]) -> list[dict[str, str]]:
    """Group skills by category, keeping first-seen category order."""
    grouped: dict[str, list[str]] = {}
    for skill in skills:
        grouped.setdefault(skill["category"], []).append(skill["name"])
    return [
        {"category": category, "skills": ", ".join(names)} for category, names in grouped.items()
    ]


def build_projects_section(projects: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    return [
        {
            "title": project["title"],
            "description": project.get("description") or "",
            "technologies": list(project.get("technologies") or []),
            "github_url": project.get("github_url") or "",
            "live_url": project.get("live_url") or "",
        }
        for project in projects
    ]


def build_portfolio_sections(
    include: Iterable[SectionKind | str] | None = None,
) -> list[dict[str, Any]]:
    """Build resume sections for *include* (all kinds by default), in kind order."""
    wanted = set(SectionKind) if include is None else {_coerce_kind(k) for k in include}

    builders = {
        SectionKind.PERSONAL: lambda: build_personal_section(singletons.overview.get()),
        SectionKind.EXPERIENCE: lambda: build_experience_section(
            experience_service.list_experiences()
        ),
        SectionKind.EDUCATION: lambda: build_education_section(records.education.list_all()),
        SectionKind.SKILLS: lambda: build_skills_section(records.skills.list_all()),
        SectionKind.PROJECTS: lambda: build_projects_section(records.projects.list_all()),
    }

    sections = []
    for kind in SectionKind:
        if kind not in wanted:
            continue
        content = builders[kind]()
        if not content:
            continue
        sections.append(
            {
                "kind": kind.value,
                "title": DEFAULT_SECTION_TITLES[kind],
                "content": content,
                "is_visible": True,
            }
        )
    return sections


def create_resume_from_portfolio(
    title: str,
    style: Mapping[str, Any] | None = None,
    include: Iterable[SectionKind | str] | None = None,
) -> dict[str, Any]:
    """Create a resume whose sections are copied from the portfolio.

    Args:
        title: Resume title.
        style: Optional ``template``/``theme``/``font_family``/``font_size``/
            ``spacing`` values.
        include: Section kinds to build; every kind when omitted.

    Raises:
        ValidationError: If the title is blank or a kind is unknown.
    """
    sections = build_portfolio_sections(include)
    return create_resume({**(style or {}), "title": title, "sections": sections})
