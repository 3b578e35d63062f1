"""Typed content for resume sections.

Every section kind has exactly one content variant:

- ``personal``   -> :class:`PersonalContent`
- ``experience`` -> ``list[ExperienceItem]``
- ``education``  -> ``list[EducationItem]``
- ``skills``     -> ``list[SkillGroup]``
- ``projects``   -> ``list[ProjectItem]``

Content is persisted as JSON text. :func:`serialize_content` validates the
shape for the kind and writes back exactly the fields the caller supplied;
:func:`parse_content` turns stored text back into the typed variant, or into
:class:`UnparseableContent` when the text is not valid JSON or does not match
the kind. :func:`normalize_content` is the read-side pass that rewrites
experience/education dates to plain ``YYYY-MM-DD`` strings for date inputs.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import UTC, date, datetime
from enum import StrEnum
from typing import Annotated, Any

import pydantic
from pydantic import BaseModel, BeforeValidator, ConfigDict, TypeAdapter

from portfolio_cms.services.errors import ValidationError

__all__ = [
    "EducationItem",
    "ExperienceItem",
    "PersonalContent",
    "ProjectItem",
    "SectionContent",
    "SectionKind",
    "SkillGroup",
    "UnparseableContent",
    "content_to_json",
    "normalize_content",
    "normalize_date",
    "parse_content",
    "serialize_content",
    "validate_content",
]


class SectionKind(StrEnum):
    """Discriminator selecting a section's content shape."""

    PERSONAL = "personal"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"


def _date_to_text(value: Any) -> Any:
    if isinstance(value, datetime | date):
        return value.isoformat()
    return value


DateText = Annotated[str | None, BeforeValidator(_date_to_text)]


class _ContentModel(BaseModel):
    # Unknown keys are kept so older payloads survive a parse/serialize cycle.
    model_config = ConfigDict(extra="allow")


class PersonalContent(_ContentModel):
    name: str | None = None
    title: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None


class ExperienceItem(_ContentModel):
    company: str
    position: str | None = None
    location: str | None = None
    start_date: DateText = None
    end_date: DateText = None
    is_current: bool = False
    description: str | None = None


class EducationItem(_ContentModel):
    institution: str
    degree: str | None = None
    field: str | None = None
    location: str | None = None
    start_date: DateText = None
    end_date: DateText = None
    is_current: bool = False
    description: str | None = None


class SkillGroup(_ContentModel):
    category: str
    skills: str = ""  # comma-joined free text

    def skill_names(self) -> list[str]:
        """Split the comma-joined text into trimmed, non-empty names."""
        return [name.strip() for name in self.skills.split(",") if name.strip()]


class ProjectItem(_ContentModel):
    title: str
    description: str | None = None
    technologies: list[str] = []
    github_url: str | None = None
    live_url: str | None = None


SectionContent = (
    PersonalContent
    | list[ExperienceItem]
    | list[EducationItem]
    | list[SkillGroup]
    | list[ProjectItem]
)

_CONTENT_TYPES: dict[SectionKind, Any] = {
    SectionKind.PERSONAL: PersonalContent,
    SectionKind.EXPERIENCE: list[ExperienceItem],
    SectionKind.EDUCATION: list[EducationItem],
    SectionKind.SKILLS: list[SkillGroup],
    SectionKind.PROJECTS: list[ProjectItem],
}

_missing_kinds = set(SectionKind) - set(_CONTENT_TYPES)
if _missing_kinds:
    raise RuntimeError(f"No content type registered for section kinds: {sorted(_missing_kinds)}")

_ADAPTERS: dict[SectionKind, TypeAdapter[Any]] = {
    kind: TypeAdapter(content_type) for kind, content_type in _CONTENT_TYPES.items()
}

_DATED_KINDS = frozenset({SectionKind.EXPERIENCE, SectionKind.EDUCATION})


@dataclass(frozen=True)
class UnparseableContent:
    """Stored content that could not be decoded for its kind.

    The raw text is passed through unchanged so reads never fail.
    """

    raw: str
    error: str = ""


def _coerce_kind(kind: SectionKind | str) -> SectionKind:
    try:
        return SectionKind(kind)
    except ValueError:
        allowed = ", ".join(k.value for k in SectionKind)
        raise ValidationError(f"Unknown section kind {kind!r}. Allowed: {allowed}") from None


def validate_content(kind: SectionKind | str, content: Any) -> SectionContent:
    """Validate *content* against the variant for *kind*.

    Raises:
        ValidationError: If the kind is unknown or the shape does not match.
    """
    section_kind = _coerce_kind(kind)
    try:
        return _ADAPTERS[section_kind].validate_python(content)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "content"
        raise ValidationError(
            f"Invalid {section_kind.value} content at {location}: {first['msg']}"
        ) from exc


def content_to_json(kind: SectionKind | str, content: SectionContent) -> Any:
    """Return the JSON-compatible structure for typed *content*."""
    section_kind = _coerce_kind(kind)
    return _ADAPTERS[section_kind].dump_python(content, mode="json", exclude_unset=True)


def serialize_content(kind: SectionKind | str, content: Any) -> str:
    """Validate *content* for *kind* and return it as JSON text."""
    typed = validate_content(kind, content)
    return json.dumps(content_to_json(kind, typed), ensure_ascii=False)


def parse_content(kind: SectionKind | str, text: str) -> SectionContent | UnparseableContent:
    """Decode stored *text* into the typed variant for *kind*.

    Returns:
        The typed content, or :class:`UnparseableContent` wrapping the raw
        text when it is not valid JSON or does not match the kind.
    """
    try:
        section_kind = SectionKind(kind)
    except ValueError:
        return UnparseableContent(raw=text, error=f"unknown section kind {kind!r}")

    try:
        return _ADAPTERS[section_kind].validate_json(text)
    except pydantic.ValidationError as exc:
        return UnparseableContent(raw=text, error=exc.errors()[0]["msg"])


def normalize_date(value: Any) -> Any:
    """Reduce a date or timestamp string to ``YYYY-MM-DD``.

    Empty values become ``""``; timestamps with an offset are converted to
    UTC first. Strings that are not dates are returned unchanged.
    """
    if value is None or value == "":
        return ""
    if not isinstance(value, str):
        return value
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return value
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC)
    return parsed.date().isoformat()


def normalize_content(kind: SectionKind | str, data: Any) -> Any:
    """Apply read-side normalization to JSON-compatible section *data*."""
    if kind not in _DATED_KINDS or not isinstance(data, list):
        return data
    normalized = []
    for item in data:
        if isinstance(item, dict):
            item = {
                **item,
                "start_date": normalize_date(item.get("start_date")),
                "end_date": normalize_date(item.get("end_date")),
            }
        normalized.append(item)
    return normalized
