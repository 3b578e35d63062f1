"""About model: the singleton "About me" block."""

from __future__ import annotations

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_cms.data.db import Base
from portfolio_cms.data.models.mixins import TimestampMixin


class About(TimestampMixin, Base):
    __tablename__ = "about"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)  # markdown
    image_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
