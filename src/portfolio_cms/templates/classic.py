"""Classic resume template.

Serif body with small-caps section headings underlined by a full-width
rule, in the style of a traditional printed CV.
"""

from __future__ import annotations

from portfolio_cms.templates.sectioned import SectionedResumeTemplate

__all__ = ["ClassicResumeTemplate"]


class ClassicResumeTemplate(SectionedResumeTemplate):
    """Traditional serif resume with ruled section headings."""

    key = "classic"
    section_format = (
        r"\titleformat{\section}{\vspace{-4pt}\scshape\raggedright\large}{}{0em}{}"
        r"[\titlerule \vspace{-5pt}]"
    )
