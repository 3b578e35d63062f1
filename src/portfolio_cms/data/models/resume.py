"""Resume and ResumeSection models.

A Resume exclusively owns an ordered list of sections. Each section stores
its kind-dependent content as serialized JSON text; see
``portfolio_cms.services.section_content`` for the per-kind shapes.
"""

from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_cms.data.db import Base
from portfolio_cms.data.models.mixins import TimestampMixin


class Resume(TimestampMixin, Base):
    """A printable resume built from portfolio data.

    Attributes:
        title: Resume name shown in the dashboard.
        template: Layout identifier (modern, classic, minimal).
        theme: Color theme (light, dark).
        font_family / font_size / spacing: Typography settings.
        sections: Owned sections, sorted by ``order``.
    """

    __tablename__ = "resumes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    template: Mapped[str] = mapped_column(String(32), nullable=False, default="modern")
    theme: Mapped[str] = mapped_column(String(32), nullable=False, default="light")
    font_family: Mapped[str] = mapped_column(String(64), nullable=False, default="inter")
    font_size: Mapped[str] = mapped_column(String(16), nullable=False, default="medium")
    spacing: Mapped[str] = mapped_column(String(16), nullable=False, default="normal")

    sections: Mapped[list[ResumeSection]] = relationship(
        "ResumeSection",
        back_populates="resume",
        cascade="all, delete-orphan",
        order_by="ResumeSection.order",
    )


class ResumeSection(Base):
    """A typed, orderable, independently visible block of a resume."""

    __tablename__ = "resume_sections"
    __table_args__ = (UniqueConstraint("resume_id", "order", name="uq_resume_section_order"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    resume_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("resumes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    kind: Mapped[str] = mapped_column(String(32), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)  # JSON text
    order: Mapped[int] = mapped_column(Integer, nullable=False)
    is_visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    resume: Mapped[Resume] = relationship("Resume", back_populates="sections")
