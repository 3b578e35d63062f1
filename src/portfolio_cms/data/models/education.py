"""Education model for degrees and programs."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, CheckConstraint, Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_cms.data.db import Base
from portfolio_cms.data.models.mixins import OrderedMixin, TimestampMixin


class Education(TimestampMixin, OrderedMixin, Base):
    """Education entry.

    Attributes:
        institution: School or university name.
        degree: Degree earned or pursued.
        field_of_study: Major / field.
        location: Campus location.
        start_date / end_date: Date range; ``end_date`` is None while current.
        is_current: Whether the program is ongoing.
        description: Free-form notes.
        logo_url: Logo asset path or URL.
    """

    __tablename__ = "education"
    __table_args__ = (
        CheckConstraint(
            "NOT (is_current AND end_date IS NOT NULL)",
            name="ck_education_current_has_no_end",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    institution: Mapped[str] = mapped_column(String(255), nullable=False)
    degree: Mapped[str] = mapped_column(String(255), nullable=False)
    field_of_study: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_current: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    logo_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
