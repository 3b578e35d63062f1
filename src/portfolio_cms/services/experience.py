"""Experience service: employers and the positions held at each.

An Experience owns its ExperiencePosition rows. Position operations are
always scoped by the parent experience id, so a position id that belongs to
another experience is reported as not found.

A position with ``is_current`` set must not carry an ``end_date``; the
combination is rejected rather than silently repaired. An experience counts
as current when at least one of its positions is current.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any, TypedDict

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from portfolio_cms.data.models import Experience, ExperiencePosition
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
    "ExperienceData",
    "PositionData",
    "create_experience",
    "create_position",
    "delete_experience",
    "delete_position",
    "get_experience",
    "get_position",
    "list_current_experiences",
    "list_experiences",
    "list_positions",
    "reorder_experiences",
    "reorder_positions",
    "update_experience",
    "update_position",
]

# Fields that can be updated on Experience
_EXPERIENCE_FIELDS = ("company", "location", "description", "logo_url", "order")

# Fields that can be updated on ExperiencePosition
_POSITION_FIELDS = (
    "title",
    "start_date",
    "end_date",
    "is_current",
    "description",
    "year",
    "employment_type",
    "icon",
    "skills",
    "order",
)


class PositionData(TypedDict, total=False):
    """TypedDict for position data."""

    title: str
    start_date: date
    end_date: date | None
    is_current: bool
    description: str
    year: str
    employment_type: str
    icon: str
    skills: list[str]
    order: int


class ExperienceData(TypedDict, total=False):
    """TypedDict for experience data; ``positions`` is only read on create."""

    company: str
    location: str
    description: str
    logo_url: str
    order: int
    positions: list[PositionData]


def _position_to_dict(position: ExperiencePosition) -> dict:
    return record_to_dict(position)


def _experience_to_dict(experience: Experience) -> dict:
    """Convert an Experience (with its positions) to a dictionary."""
    data = record_to_dict(experience)
    data["positions"] = [_position_to_dict(p) for p in experience.positions]
    data["is_current"] = experience.is_current
    return data


def _experience_query():  # noqa: ANN202
    return select(Experience).options(selectinload(Experience.positions))


def _get_experience_or_raise(session: Session, experience_id: int) -> Experience:
    experience = session.scalars(
        _experience_query().where(Experience.id == experience_id)
    ).first()
    if experience is None:
        raise NotFoundError("Experience", experience_id)
    return experience


def _get_position_or_raise(
    session: Session, experience_id: int, position_id: int
) -> ExperiencePosition:
    """Get a position by ID, ensuring it belongs to the experience."""
    _get_experience_or_raise(session, experience_id)
    position = session.scalars(
        select(ExperiencePosition).where(
            ExperiencePosition.id == position_id,
            ExperiencePosition.experience_id == experience_id,
        )
    ).first()
    if position is None:
        raise NotFoundError("Position", position_id)
    return position


def _validate_position_data(position_data: Mapping[str, Any]) -> None:
    """Validate position data.

    Raises:
        ValidationError: If the title or start date is missing, the date
            range is inverted, or a current position has an end date.
    """
    require_fields(position_data, ("title", "start_date"), "Position")
    check_date_range(position_data.get("start_date"), position_data.get("end_date"))
    check_current_has_no_end(position_data.get("is_current"), position_data.get("end_date"))


def _apply_updates(record: Any, data: Mapping[str, Any], fields: Sequence[str]) -> None:
    for field in fields:
        if field not in data:
            continue
        if field == "order" and data[field] is None:
            continue
        setattr(record, field, data[field])


def _new_position(position_data: Mapping[str, Any], order: int) -> ExperiencePosition:
    position = ExperiencePosition(order=order)
    _apply_updates(position, position_data, _POSITION_FIELDS)
    return position


def list_experiences() -> list[dict]:
    """Get all experiences ordered by ``order``, each with its positions."""
    with store_session("list experiences") as session:
        experiences = session.scalars(
            _experience_query().order_by(Experience.order, Experience.id)
        ).all()
        return [_experience_to_dict(e) for e in experiences]


def list_current_experiences() -> list[dict]:
    """Get every experience with at least one current position.

    Only the current positions are included on each returned experience, in
    the shape the overview page highlights as "current jobs".
    """
    result = []
    for experience in list_experiences():
        current = [p for p in experience["positions"] if p["is_current"]]
        if current:
            result.append({**experience, "positions": current})
    return result


def get_experience(experience_id: int) -> dict:
    with store_session(f"get experience {experience_id}") as session:
        return _experience_to_dict(_get_experience_or_raise(session, experience_id))


def create_experience(experience_data: ExperienceData) -> dict:
    """Create an experience, optionally with its initial positions.

    Raises:
        ValidationError: If the company or any position is invalid.
    """
    try:
        require_fields(experience_data, ("company",), "Experience")
        for position_data in experience_data.get("positions") or []:
            _validate_position_data(position_data)
    except ValidationError as exc:
        logger.warning("Validation failed for experience: %s", exc.message)
        raise

    with store_session("create experience") as session:
        experience = Experience()
        _apply_updates(experience, experience_data, _EXPERIENCE_FIELDS)
        if experience_data.get("order") is None:
            last = session.scalar(select(func.max(Experience.order)))
            experience.order = 0 if last is None else last + 1
        for index, position_data in enumerate(experience_data.get("positions") or []):
            order = position_data.get("order")
            if order is None:
                order = index
            experience.positions.append(_new_position(position_data, order))
        session.add(experience)
        session.flush()
        return _experience_to_dict(experience)


def update_experience(experience_id: int, experience_data: ExperienceData) -> dict:
    """Replace an experience's own fields; positions are left untouched."""
    with store_session(f"update experience {experience_id}") as session:
        experience = _get_experience_or_raise(session, experience_id)
        try:
            require_fields(experience_data, ("company",), "Experience")
        except ValidationError as exc:
            logger.warning("Validation failed for experience update: %s", exc.message)
            raise
        _apply_updates(experience, experience_data, _EXPERIENCE_FIELDS)
        session.flush()
        return _experience_to_dict(experience)


def delete_experience(experience_id: int) -> None:
    """Delete an experience together with all of its positions."""
    with store_session(f"delete experience {experience_id}") as session:
        experience = _get_experience_or_raise(session, experience_id)
        session.delete(experience)
        logger.info(
            "Deleted experience %d with %d positions", experience_id, len(experience.positions)
        )


def reorder_experiences(ordered_ids: Sequence[int]) -> list[dict]:
    """Rewrite every experience's ``order`` from *ordered_ids* in one transaction."""
    with store_session("reorder experiences") as session:
        experiences = session.scalars(_experience_query()).all()
        apply_order(experiences, ordered_ids, "Experience")
        session.flush()
        return [_experience_to_dict(e) for e in sorted(experiences, key=lambda e: e.order)]


def list_positions(experience_id: int) -> list[dict]:
    with store_session(f"list positions of experience {experience_id}") as session:
        experience = _get_experience_or_raise(session, experience_id)
        return [_position_to_dict(p) for p in experience.positions]


def get_position(experience_id: int, position_id: int) -> dict:
    with store_session(f"get position {position_id}") as session:
        return _position_to_dict(_get_position_or_raise(session, experience_id, position_id))


def create_position(experience_id: int, position_data: PositionData) -> dict:
    """Add a position to an experience; appended last when no order is given.

    Raises:
        NotFoundError: If the experience does not exist.
        ValidationError: If the position data is invalid.
    """
    with store_session(f"create position for experience {experience_id}") as session:
        experience = _get_experience_or_raise(session, experience_id)
        try:
            _validate_position_data(position_data)
        except ValidationError as exc:
            logger.warning("Validation failed for position: %s", exc.message)
            raise

        order = position_data.get("order")
        if order is None:
            order = max((p.order for p in experience.positions), default=-1) + 1
        position = _new_position(position_data, order)
        experience.positions.append(position)
        session.flush()
        return _position_to_dict(position)


def update_position(experience_id: int, position_id: int, position_data: PositionData) -> dict:
    """Replace a position's fields.

    Raises:
        NotFoundError: If either the experience or the position does not
            resolve, or the position belongs to another experience.
        ValidationError: If the resulting position would be invalid.
    """
    with store_session(f"update position {position_id}") as session:
        position = _get_position_or_raise(session, experience_id, position_id)

        merged = {field: getattr(position, field) for field in _POSITION_FIELDS}
        merged.update(position_data)
        try:
            _validate_position_data(merged)
        except ValidationError as exc:
            logger.warning(
                "Validation failed for position %d update: %s", position_id, exc.message
            )
            raise

        _apply_updates(position, position_data, _POSITION_FIELDS)
        session.flush()
        return _position_to_dict(position)


def delete_position(experience_id: int, position_id: int) -> None:
    with store_session(f"delete position {position_id}") as session:
        session.delete(_get_position_or_raise(session, experience_id, position_id))


def reorder_positions(experience_id: int, ordered_ids: Sequence[int]) -> list[dict]:
    """Rewrite the ``order`` of one experience's positions in one transaction."""
    with store_session(f"reorder positions of experience {experience_id}") as session:
        experience = _get_experience_or_raise(session, experience_id)
        apply_order(experience.positions, ordered_ids, "Position")
        session.flush()
        return [_position_to_dict(p) for p in sorted(experience.positions, key=lambda p: p.order)]
