"""Project model: a showcased piece of work."""

from __future__ import annotations

from sqlalchemy import JSON, Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_cms.data.db import Base
from portfolio_cms.data.models.mixins import OrderedMixin, TimestampMixin


class Project(TimestampMixin, OrderedMixin, Base):
    """A portfolio project.

    Attributes:
        title: Project name.
        description: One-line summary.
        content: Long-form markdown write-up.
        image_url: Cover image path or URL.
        github_url / live_url: Source and demo links.
        technologies: Tech stack labels (JSON list).
        featured: Whether the project is highlighted.
    """

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    github_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    live_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    technologies: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
