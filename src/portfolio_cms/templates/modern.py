"""Modern resume template.

Helvetica sans-serif, no decorative rules on section headers. Clean and
dense single-page layout.
"""

from __future__ import annotations

from pylatex import Package

from portfolio_cms.templates.sectioned import SectionedResumeTemplate

__all__ = ["ModernResumeTemplate"]


class ModernResumeTemplate(SectionedResumeTemplate):
    """Modern sans-serif resume."""

    key = "modern"
    packages = [Package("helvet")]
    font_setup = r"\renewcommand{\familydefault}{\sfdefault}"
    section_format = (
        r"\titleformat{\section}{\large\bfseries}{}{0em}{}" "\n"
        r"\titlespacing{\section}{0pt}{8pt}{4pt}"
    )
