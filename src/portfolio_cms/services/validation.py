"""Field checks shared by the content services."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from portfolio_cms.services.errors import ValidationError

__all__ = ["check_current_has_no_end", "check_date_range", "require_fields"]


def require_fields(data: Mapping[str, Any], fields: Iterable[str], label: str) -> None:
    """Raise if any of *fields* is missing or a blank string."""
    for field in fields:
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"{label} {field} is required")


def check_date_range(
    start: date | None,
    end: date | None,
    *,
    start_field: str = "start_date",
    end_field: str = "end_date",
) -> None:
    if start and end and end < start:
        raise ValidationError(f"{end_field} cannot be before {start_field}")


def check_current_has_no_end(is_current: bool | None, end_date: date | None) -> None:
    if is_current and end_date is not None:
        raise ValidationError("end_date must be empty when is_current is true")
