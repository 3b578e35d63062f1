"""Generic CRUD service for flat, ordered portfolio records.

Skills, social links, projects, education, awards and certifications share
the same contract: list by ``order``, create, full-replace update, delete,
and a batched reorder. Each resource gets a :class:`RecordService` instance
configured with its model, mutable fields, required fields and any extra
checks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from sqlalchemy import func, select

from portfolio_cms.data.models import Award, Certification, Education, Project, Skill, SocialLink
from portfolio_cms.services.errors import NotFoundError, ValidationError
from portfolio_cms.services.ordering import apply_order
from portfolio_cms.services.store import record_to_dict, store_session
from portfolio_cms.services.validation import (
    check_current_has_no_end,
    check_date_range,
    require_fields,
)

logger = logging.getLogger(__name__)

__all__ = [
    "RecordService",
    "awards",
    "certifications",
    "education",
    "projects",
    "skills",
    "social_links",
]

RecordCheck = Callable[[Mapping[str, Any]], None]


class RecordService:
    """CRUD operations for one ordered content table."""

    def __init__(
        self,
        model: type,
        label: str,
        fields: Sequence[str],
        *,
        required: Sequence[str] = (),
        checks: Sequence[RecordCheck] = (),
    ) -> None:
        self.model = model
        self.label = label
        self.fields = tuple(fields)
        self.required = tuple(required)
        self.checks = tuple(checks)

    def _validate(self, data: Mapping[str, Any]) -> None:
        require_fields(data, self.required, self.label)
        for check in self.checks:
            check(data)

    def _get_or_raise(self, session: Any, record_id: int) -> Any:
        record = session.get(self.model, record_id)
        if record is None:
            raise NotFoundError(self.label, record_id)
        return record

    def _apply(self, record: Any, data: Mapping[str, Any]) -> None:
        for field in self.fields:
            if field not in data:
                continue
            if field == "order" and data[field] is None:
                continue
            setattr(record, field, data[field])

    def list_all(self) -> list[dict[str, Any]]:
        """Return all records sorted by ``order``, newest first on ties."""
        with store_session(f"list {self.label} records") as session:
            records = session.scalars(
                select(self.model).order_by(
                    self.model.order, self.model.created_at.desc(), self.model.id.desc()
                )
            ).all()
            return [record_to_dict(r) for r in records]

    def get(self, record_id: int) -> dict[str, Any]:
        with store_session(f"get {self.label} {record_id}") as session:
            return record_to_dict(self._get_or_raise(session, record_id))

    def create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Create a record; it is appended to the end when no order is given.

        Raises:
            ValidationError: If required fields are missing or checks fail.
        """
        try:
            self._validate(data)
        except ValidationError as exc:
            logger.warning("Rejected new %s: %s", self.label, exc.message)
            raise

        with store_session(f"create {self.label}") as session:
            record = self.model()
            self._apply(record, data)
            if data.get("order") is None:
                last = session.scalar(select(func.max(self.model.order)))
                record.order = 0 if last is None else last + 1
            session.add(record)
            session.flush()
            return record_to_dict(record)

    def update(self, record_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
        """Replace the mutable fields of a record.

        Raises:
            NotFoundError: If the record does not exist.
            ValidationError: If required fields are missing or checks fail.
        """
        with store_session(f"update {self.label} {record_id}") as session:
            record = self._get_or_raise(session, record_id)
            try:
                self._validate(data)
            except ValidationError as exc:
                logger.warning("Rejected %s %d update: %s", self.label, record_id, exc.message)
                raise
            self._apply(record, data)
            session.flush()
            return record_to_dict(record)

    def delete(self, record_id: int) -> None:
        with store_session(f"delete {self.label} {record_id}") as session:
            session.delete(self._get_or_raise(session, record_id))

    def reorder(self, ordered_ids: Sequence[int]) -> list[dict[str, Any]]:
        """Rewrite ``order`` for every record from *ordered_ids* in one transaction."""
        with store_session(f"reorder {self.label} records") as session:
            records = session.scalars(select(self.model)).all()
            apply_order(records, ordered_ids, self.label)
            session.flush()
            return [record_to_dict(r) for r in sorted(records, key=lambda r: r.order)]


def _check_education(data: Mapping[str, Any]) -> None:
    check_date_range(data.get("start_date"), data.get("end_date"))
    check_current_has_no_end(data.get("is_current"), data.get("end_date"))


def _check_certification(data: Mapping[str, Any]) -> None:
    check_date_range(
        data.get("issue_date"),
        data.get("expiry_date"),
        start_field="issue_date",
        end_field="expiry_date",
    )


def _check_skill_level(data: Mapping[str, Any]) -> None:
    level = data.get("level")
    if level is not None and not 1 <= level <= 5:
        raise ValidationError("skill level must be between 1 and 5")


skills = RecordService(
    Skill,
    "Skill",
    ("name", "category", "icon_url", "level", "order"),
    required=("name", "category"),
    checks=(_check_skill_level,),
)

social_links = RecordService(
    SocialLink,
    "Social link",
    ("platform", "url", "icon_url", "is_active", "order"),
    required=("platform", "url"),
)

projects = RecordService(
    Project,
    "Project",
    (
        "title",
        "description",
        "content",
        "image_url",
        "github_url",
        "live_url",
        "technologies",
        "featured",
        "order",
    ),
    required=("title",),
)

education = RecordService(
    Education,
    "Education",
    (
        "institution",
        "degree",
        "field_of_study",
        "location",
        "start_date",
        "end_date",
        "is_current",
        "description",
        "logo_url",
        "order",
    ),
    required=("institution", "degree", "start_date"),
    checks=(_check_education,),
)

awards = RecordService(
    Award,
    "Award",
    ("title", "issuer", "date", "description", "image_url", "url", "order"),
    required=("title", "issuer", "date"),
)

certifications = RecordService(
    Certification,
    "Certification",
    (
        "title",
        "issuer",
        "issue_date",
        "expiry_date",
        "credential_id",
        "description",
        "image_url",
        "url",
        "order",
    ),
    required=("title", "issuer", "issue_date"),
    checks=(_check_certification,),
)
