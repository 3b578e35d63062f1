"""Minimal resume template: monospaced body and plain headings."""

from __future__ import annotations

from portfolio_cms.templates.sectioned import SectionedResumeTemplate

__all__ = ["MinimalResumeTemplate"]


class MinimalResumeTemplate(SectionedResumeTemplate):
    key = "minimal"
    font_setup = r"\renewcommand{\familydefault}{\ttdefault}"
    section_format = (
        r"\titleformat{\section}{\normalsize\bfseries}{}{0em}{}" "\n"
        r"\titlespacing{\section}{0pt}{10pt}{2pt}"
    )
