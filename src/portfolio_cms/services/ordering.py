"""Batched reorder: rewrite ``order`` for a whole list in one transaction."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from portfolio_cms.services.errors import NotFoundError, ValidationError

__all__ = ["apply_order"]


def apply_order(records: Sequence[Any], ordered_ids: Sequence[int], label: str) -> None:
    """Set ``record.order`` to the index of its id in *ordered_ids*.

    *ordered_ids* must list every record exactly once. Nothing is modified
    when the list is rejected.

    Raises:
        ValidationError: On duplicate ids or when records are left out.
        NotFoundError: When an id does not belong to *records*.
    """
    if len(set(ordered_ids)) != len(ordered_ids):
        raise ValidationError(f"{label} order contains duplicate ids")

    by_id = {record.id: record for record in records}
    for record_id in ordered_ids:
        if record_id not in by_id:
            raise NotFoundError(label, record_id)

    missing = sorted(set(by_id) - set(ordered_ids))
    if missing:
        raise ValidationError(f"{label} order must include every record; missing ids {missing}")

    for index, record_id in enumerate(ordered_ids):
        by_id[record_id].order = index
