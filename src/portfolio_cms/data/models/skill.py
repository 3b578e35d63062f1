"""Skill model: one technology shown in the tech-stack section."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_cms.data.db import Base
from portfolio_cms.data.models.mixins import OrderedMixin, TimestampMixin


class Skill(TimestampMixin, OrderedMixin, Base):
    """A single skill.

    Attributes:
        name: Display name (e.g. "React").
        category: Grouping label (e.g. "Frontend").
        icon_url: Icon asset path or URL.
        level: Proficiency from 1 to 5.
        order: Presentation sequence, rewritten by reorder.
    """

    __tablename__ = "skills"
    __table_args__ = (CheckConstraint("level BETWEEN 1 AND 5", name="ck_skill_level_range"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    category: Mapped[str] = mapped_column(String(128), nullable=False)
    icon_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=3)
