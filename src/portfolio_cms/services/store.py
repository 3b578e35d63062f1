"""Session helper that turns persistence failures into ``StoreError``."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio_cms.data.db import get_session
from portfolio_cms.services.errors import StoreError

logger = logging.getLogger(__name__)

__all__ = ["record_to_dict", "store_session"]


@contextmanager
def store_session(action: str) -> Iterator[Session]:
    """Open a transactional session for *action*.

    Service errors raised inside the block propagate unchanged (after
    rollback); SQLAlchemy failures are logged and re-raised as
    :class:`StoreError`.
    """
    try:
        with get_session() as session:
            yield session
    except SQLAlchemyError as exc:
        logger.exception("Store failure while trying to %s", action)
        raise StoreError(f"Failed to {action}. Please try again.") from exc


def record_to_dict(record: Any) -> dict[str, Any]:
    """Convert an ORM row to a dict of its column attributes."""
    return {attr.key: getattr(record, attr.key) for attr in inspect(record).mapper.column_attrs}
