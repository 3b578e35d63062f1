"""Singleton content: Overview, About and site Settings.

Each table holds at most one row, stored under the well-known
``SINGLETON_ID``. Saving is a true upsert: the row is updated when it
exists and created otherwise, so callers never need to know which path ran
and the table can never hold a second row.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from portfolio_cms.data.models import SINGLETON_ID, About, Overview, SiteSettings
from portfolio_cms.services.errors import ValidationError
from portfolio_cms.services.store import record_to_dict, store_session
from portfolio_cms.services.validation import require_fields

logger = logging.getLogger(__name__)

__all__ = ["SingletonService", "about", "overview", "site_settings"]


class SingletonService:
    """Get / upsert for a single-row table."""

    def __init__(
        self,
        model: type,
        label: str,
        fields: Sequence[str],
        *,
        required: Sequence[str] = (),
    ) -> None:
        self.model = model
        self.label = label
        self.fields = tuple(fields)
        self.required = tuple(required)

    def get(self) -> dict[str, Any] | None:
        """Return the record, or None when nothing has been saved yet."""
        with store_session(f"get {self.label}") as session:
            record = session.get(self.model, SINGLETON_ID)
            return record_to_dict(record) if record is not None else None

    def save(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Create or update the single record with *data*.

        Raises:
            ValidationError: If required fields are missing.
        """
        try:
            require_fields(data, self.required, self.label)
        except ValidationError as exc:
            logger.warning("Rejected %s save: %s", self.label, exc.message)
            raise

        with store_session(f"save {self.label}") as session:
            record = session.get(self.model, SINGLETON_ID)
            if record is None:
                record = self.model(id=SINGLETON_ID)
                session.add(record)
                logger.info("Creating %s record", self.label)
            for field in self.fields:
                if field in data:
                    setattr(record, field, data[field])
            session.flush()
            return record_to_dict(record)

    def count(self) -> int:
        with store_session(f"count {self.label}") as session:
            return session.query(self.model).count()


overview = SingletonService(
    Overview,
    "Overview",
    (
        "first_name",
        "last_name",
        "display_name",
        "username",
        "gender",
        "bio",
        "flip_sentences",
        "address",
        "phone_number",
        "email",
        "website",
        "other_websites",
        "date_of_birth",
        "job_title",
        "avatar",
        "og_image",
        "keywords",
        "date_created",
    ),
    required=("first_name", "last_name"),
)

about = SingletonService(
    About,
    "About",
    ("title", "description", "content", "image_url"),
    required=("title",),
)

site_settings = SingletonService(
    SiteSettings,
    "Settings",
    ("site_title", "site_description", "theme"),
    required=("site_title",),
)
