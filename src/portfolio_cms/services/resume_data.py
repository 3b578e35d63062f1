"""Template-agnostic data contracts for resume rendering.

These TypedDicts describe what flows from the resume store to every LaTeX
template. Templates depend ONLY on these contracts (not the ORM) so the
storage layer can evolve independently. Entry dicts mirror the JSON
content shapes in ``portfolio_cms.services.section_content``.
"""

from __future__ import annotations

from typing import Any, TypedDict

__all__ = [
    "EducationEntry",
    "ExperienceEntry",
    "PersonalInfo",
    "ProjectEntry",
    "RenderSection",
    "ResumeDocument",
    "SkillGroupEntry",
]


class PersonalInfo(TypedDict, total=False):
    """Name and contact details shown in the resume header."""

    name: str
    title: str
    email: str
    phone: str
    website: str
    location: str
    bio: str


class ExperienceEntry(TypedDict, total=False):
    """A single position held at a company."""

    company: str
    position: str
    location: str
    start_date: str  # YYYY-MM-DD or ""
    end_date: str
    is_current: bool
    description: str


class EducationEntry(TypedDict, total=False):
    institution: str
    degree: str
    field: str
    location: str
    start_date: str
    end_date: str
    is_current: bool
    description: str


class SkillGroupEntry(TypedDict, total=False):
    category: str
    skills: str  # comma-joined names


class ProjectEntry(TypedDict, total=False):
    title: str
    description: str
    technologies: list[str]
    github_url: str
    live_url: str


class RenderSection(TypedDict):
    """A visible section, already in display order.

    ``content`` is ``PersonalInfo`` for ``personal`` and a list of the
    matching entry dicts for every other kind.
    """

    kind: str
    title: str
    content: Any


class ResumeDocument(TypedDict, total=False):
    """Top-level bundle passed to every template's ``build()`` method."""

    title: str
    template: str
    theme: str
    font_family: str
    font_size: str
    spacing: str
    sections: list[RenderSection]
