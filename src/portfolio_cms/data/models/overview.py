"""Overview model: the hero/profile record shown at the top of the portfolio.

Only one row is meant to exist; it lives under ``SINGLETON_ID``.
"""

from __future__ import annotations

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_cms.data.db import Base
from portfolio_cms.data.models.mixins import TimestampMixin

SINGLETON_ID = 1


class Overview(TimestampMixin, Base):
    """Personal profile information.

    Attributes:
        first_name / last_name / display_name / username: Identity fields.
        bio: Short tagline.
        flip_sentences: Rotating headline phrases (JSON list).
        address / phone_number / email / website: Contact fields.
        other_websites: Additional links (JSON list).
        job_title: Current headline title.
        avatar / og_image: Asset paths or URLs.
        keywords: SEO keywords (JSON list).
    """

    __tablename__ = "overview"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str] = mapped_column(String(128), nullable=False)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    username: Mapped[str | None] = mapped_column(String(128), nullable=True)
    gender: Mapped[str | None] = mapped_column(String(32), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    flip_sentences: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website: Mapped[str | None] = mapped_column(String(512), nullable=True)
    other_websites: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    date_of_birth: Mapped[str | None] = mapped_column(String(32), nullable=True)
    job_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    avatar: Mapped[str | None] = mapped_column(String(512), nullable=True)
    og_image: Mapped[str | None] = mapped_column(String(512), nullable=True)
    keywords: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    date_created: Mapped[str | None] = mapped_column(String(32), nullable=True)
