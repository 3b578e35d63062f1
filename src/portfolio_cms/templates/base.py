"""Base class for resume layouts.

A layout turns a :class:`~portfolio_cms.services.resume_data.ResumeDocument`
into a PyLaTeX ``Document``. The helpers here format the pieces of stored
content that every layout shows the same way: free text, date spans and
links.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from pylatex.utils import escape_latex

if TYPE_CHECKING:
    from pylatex import Document

    from portfolio_cms.services.resume_data import ResumeDocument

__all__ = ["ResumeTemplate"]

_MONTHS = "Jan. Feb. Mar. Apr. May Jun. Jul. Aug. Sep. Oct. Nov. Dec.".split()

# Stored dates are normalized to YYYY-MM-DD on read; YYYY-MM and YYYY also occur.
_ISO_DATE = re.compile(r"^(\d{4})(?:-(\d{2}))?(?:-\d{2})?")

# \href targets sit inside macro arguments, where these still act as LaTeX syntax.
_HREF_TARGET = str.maketrans({"%": r"\%", "#": r"\#", "\\": "/", "{": "%7B", "}": "%7D"})


class ResumeTemplate(ABC):
    """A resume layout registered under :attr:`key`."""

    key: ClassVar[str]

    @abstractmethod
    def build(self, data: ResumeDocument) -> Document:
        """Construct a PyLaTeX ``Document`` from *data*."""

    @staticmethod
    def escape(text: str) -> str:
        r"""Escape user text for the LaTeX body (``R&D`` becomes ``R\&D``)."""
        return escape_latex(text)

    @staticmethod
    def month_year(value: str | None) -> str:
        """Show a stored date as ``Aug. 2018``; non-date text passes through."""
        if not value:
            return ""
        match = _ISO_DATE.match(value)
        if match is None:
            return escape_latex(value)
        year, month = match.groups()
        if month and 1 <= int(month) <= 12:
            return f"{_MONTHS[int(month) - 1]} {year}"
        return year

    @classmethod
    def date_span(cls, start: str | None, end: str | None, is_current: bool = False) -> str:
        """Join start and end as ``Aug. 2018 -- May 2021``, or ``-- Present``."""
        ends = "Present" if is_current else cls.month_year(end)
        return " -- ".join(part for part in (cls.month_year(start), ends) if part)

    @classmethod
    def link(cls, url: str) -> str:
        """Underlined ``\\href`` labelled with the URL minus its scheme."""
        shown = cls.escape(cls.strip_protocol(url))
        target = url.translate(_HREF_TARGET)
        return rf"\href{{{target}}}{{\underline{{{shown}}}}}"

    @staticmethod
    def strip_protocol(url: str) -> str:
        """Drop the scheme and trailing slash for display."""
        return re.sub(r"^(https?://|mailto:)", "", url).rstrip("/")
