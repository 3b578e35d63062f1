"""Experience and ExperiencePosition models.

An Experience is one employer; it owns one or more ExperiencePosition rows
(roles held at that employer over time). Deleting an Experience deletes its
positions.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import JSON, Boolean, CheckConstraint, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_cms.data.db import Base
from portfolio_cms.data.models.mixins import OrderedMixin, TimestampMixin


class Experience(TimestampMixin, OrderedMixin, Base):
    """An employer entry.

    Attributes:
        company: Employer name.
        location: City/region or "Remote".
        description: Short description of the employer.
        logo_url: Logo asset path or URL.
        positions: Roles held at this employer, sorted by ``order``.
    """

    __tablename__ = "experiences"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    logo_url: Mapped[str | None] = mapped_column(String(512), nullable=True)

    positions: Mapped[list[ExperiencePosition]] = relationship(
        "ExperiencePosition",
        back_populates="experience",
        cascade="all, delete-orphan",
        order_by="ExperiencePosition.order",
    )

    @property
    def is_current(self) -> bool:
        """True when at least one position is marked current."""
        return any(position.is_current for position in self.positions)


class ExperiencePosition(TimestampMixin, OrderedMixin, Base):
    """A role held at an employer.

    Attributes:
        experience_id: Owning experience.
        title: Role title.
        start_date / end_date: Date range; ``end_date`` is None while current.
        is_current: Whether the role is ongoing.
        description: Markdown description.
        year: Free-form display label (e.g. "10.2021 - present").
        employment_type: "Full-time", "Contract", ...
        icon: Icon identifier for the timeline.
        skills: Skill names used in the role (JSON list).
    """

    __tablename__ = "experience_positions"
    __table_args__ = (
        CheckConstraint(
            "NOT (is_current AND end_date IS NOT NULL)",
            name="ck_position_current_has_no_end",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    experience_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("experiences.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_current: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    year: Mapped[str | None] = mapped_column(String(64), nullable=True)
    employment_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    icon: Mapped[str | None] = mapped_column(String(64), nullable=True)
    skills: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    experience: Mapped[Experience] = relationship("Experience", back_populates="positions")
