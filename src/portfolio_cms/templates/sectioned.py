"""Shared layout for templates that render ordered resume sections.

Concrete templates only choose packages, the font family setup and the
section heading style; section bodies, typography settings (font size,
spacing, theme) and ordering are handled here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pylatex import Document, NoEscape, Package

from portfolio_cms.templates.base import ResumeTemplate

if TYPE_CHECKING:
    from collections.abc import Callable

    from portfolio_cms.services.resume_data import (
        EducationEntry,
        ExperienceEntry,
        PersonalInfo,
        ProjectEntry,
        ResumeDocument,
        SkillGroupEntry,
    )

__all__ = ["SectionedResumeTemplate"]

# ---------------------------------------------------------------------------
# LaTeX preamble fragments
# ---------------------------------------------------------------------------

_BASE_PACKAGES: list[Package] = [
    Package("latexsym"),
    Package("fullpage", options=NoEscape("empty")),
    Package("titlesec"),
    Package("enumitem"),
    Package("xcolor"),
    Package("hyperref", options=NoEscape("hidelinks")),
    Package("fancyhdr"),
    Package("tabularx"),
    Package("fontenc", options=NoEscape("T1")),
]

_PAGE_SETUP = r"""
\pagestyle{fancy}
\fancyhf{}
\fancyfoot{}
\renewcommand{\headrulewidth}{0pt}
\renewcommand{\footrulewidth}{0pt}
\addtolength{\oddsidemargin}{-0.5in}
\addtolength{\evensidemargin}{-0.5in}
\addtolength{\textwidth}{1in}
\addtolength{\topmargin}{-.5in}
\addtolength{\textheight}{1.0in}
\urlstyle{same}
\raggedbottom
\raggedright
\setlength{\tabcolsep}{0in}
\setlength{\parindent}{0pt}
\pdfgentounicode=1
"""

_CUSTOM_COMMANDS = r"""
\newcommand{\entryItem}[1]{
  \item\small{
    {#1 \vspace{-2pt}}
  }
}
\newcommand{\entryHeading}[4]{
  \vspace{-2pt}\item
    \begin{tabular*}{0.97\textwidth}[t]{l@{\extracolsep{\fill}}r}
      \textbf{#1} & #2 \\
      \textit{\small#3} & \textit{\small #4} \\
    \end{tabular*}\vspace{-7pt}
}
\newcommand{\projectHeading}[2]{
    \item
    \begin{tabular*}{0.97\textwidth}{l@{\extracolsep{\fill}}r}
      \small#1 & #2 \\
    \end{tabular*}\vspace{-7pt}
}
\newcommand{\entryListStart}{\begin{itemize}[leftmargin=0.15in, label={}]}
\newcommand{\entryListEnd}{\end{itemize}}
\newcommand{\itemListStart}{\begin{itemize}}
\newcommand{\itemListEnd}{\end{itemize}\vspace{-5pt}}
"""

_FONT_SIZE_OPTIONS = {"small": "10pt", "medium": "11pt", "large": "12pt"}

_SPACING_SETUP = {
    "compact": r"\linespread{0.95}\setlist{itemsep=0pt, topsep=0pt}",
    "normal": r"\linespread{1.0}\setlist{itemsep=1pt}",
    "spacious": r"\linespread{1.15}\setlist{itemsep=4pt}",
}

_DARK_THEME = r"\pagecolor{black!90}\color{white}"


class SectionedResumeTemplate(ResumeTemplate):
    """Renders a resume's sections in order with a shared set of macros."""

    packages: ClassVar[list[Package]] = []
    font_setup: ClassVar[str] = ""
    section_format: ClassVar[str] = r"\titleformat{\section}{\large\bfseries}{}{0em}{}"

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def build(self, data: ResumeDocument) -> Document:
        doc = self._create_document(data)

        renderers: dict[str, Callable[[Document, str, list], None]] = {
            "experience": self._add_experience,
            "education": self._add_education,
            "skills": self._add_skills,
            "projects": self._add_projects,
        }
        for section in data.get("sections", []):
            if section["kind"] == "personal":
                self._add_personal(doc, section["content"])
                continue
            render = renderers.get(section["kind"])
            if render is not None and section["content"]:
                render(doc, section["title"], section["content"])

        return doc

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    def _create_document(self, data: ResumeDocument) -> Document:
        font_size = _FONT_SIZE_OPTIONS.get(data.get("font_size", "medium"), "11pt")
        doc = Document(
            documentclass="article",
            document_options=["letterpaper", font_size],
            page_numbers=False,
            indent=False,
            lmodern=False,
            textcomp=False,
            microtype=False,
            fontenc=None,
            inputenc=None,
        )

        for pkg in [*_BASE_PACKAGES, *self.packages]:
            doc.packages.append(pkg)
        doc.preamble.append(NoEscape(_PAGE_SETUP))
        if self.font_setup:
            doc.preamble.append(NoEscape(self.font_setup))
        doc.preamble.append(NoEscape(self.section_format))
        doc.preamble.append(NoEscape(_SPACING_SETUP.get(data.get("spacing", "normal"), "")))
        doc.preamble.append(NoEscape(_CUSTOM_COMMANDS))
        if data.get("theme") == "dark":
            doc.preamble.append(NoEscape(_DARK_THEME))
        return doc

    def _item_list(self, text: str | None) -> list[str]:
        """Wrap non-empty description lines as list items."""
        esc = self.escape
        lines = [line.strip() for line in (text or "").splitlines() if line.strip()]
        if not lines:
            return []
        items = [rf"\entryItem{{{esc(line)}}}" for line in lines]
        return [r"\itemListStart", *items, r"\itemListEnd"]

    # -- personal ----------------------------------------------------------

    def _add_personal(self, doc: Document, info: PersonalInfo) -> None:
        esc = self.escape
        name = esc(info.get("name") or "")

        parts: list[str] = []
        if info.get("location"):
            parts.append(esc(info["location"]))
        if info.get("phone"):
            parts.append(esc(info["phone"]))
        if info.get("email"):
            parts.append(self.link(f"mailto:{info['email']}"))
        if info.get("website"):
            parts.append(self.link(info["website"]))

        separator = r" $|$ "
        heading = r"\begin{center}" rf"\textbf{{\Huge {name}}} \\ \vspace{{1pt}}"
        if info.get("title"):
            heading += rf"{esc(info['title'])} \\ \vspace{{1pt}}"
        if parts:
            heading += rf"\small {separator.join(parts)}"
        heading += r"\end{center}"
        doc.append(NoEscape(heading))

        if info.get("bio"):
            doc.append(NoEscape(rf"{{\small {esc(info['bio'])}}}"))

    # -- experience --------------------------------------------------------

    def _add_experience(self, doc: Document, title: str, entries: list[ExperienceEntry]) -> None:
        esc = self.escape
        lines = [rf"\section{{{esc(title)}}}", r"\entryListStart"]

        for entry in entries:
            date_range = self.date_span(
                entry.get("start_date"),
                entry.get("end_date"),
                entry.get("is_current", False),
            )
            lines.append(
                rf"\entryHeading{{{esc(entry.get('position') or '')}}}{{{date_range}}}"
                rf"{{{esc(entry.get('company') or '')}}}{{{esc(entry.get('location') or '')}}}"
            )
            lines.extend(self._item_list(entry.get("description")))

        lines.append(r"\entryListEnd")
        doc.append(NoEscape("\n".join(lines)))

    # -- education ---------------------------------------------------------

    def _add_education(self, doc: Document, title: str, entries: list[EducationEntry]) -> None:
        esc = self.escape
        lines = [rf"\section{{{esc(title)}}}", r"\entryListStart"]

        for entry in entries:
            degree = esc(entry.get("degree") or "")
            field = entry.get("field")
            if field:
                degree = f"{degree} in {esc(field)}" if degree else esc(field)
            date_range = self.date_span(
                entry.get("start_date"),
                entry.get("end_date"),
                entry.get("is_current", False),
            )
            lines.append(
                rf"\entryHeading{{{esc(entry.get('institution') or '')}}}"
                rf"{{{esc(entry.get('location') or '')}}}{{{degree}}}{{{date_range}}}"
            )
            lines.extend(self._item_list(entry.get("description")))

        lines.append(r"\entryListEnd")
        doc.append(NoEscape("\n".join(lines)))

    # -- skills ------------------------------------------------------------

    def _add_skills(self, doc: Document, title: str, groups: list[SkillGroupEntry]) -> None:
        esc = self.escape
        lines = [
            rf"\section{{{esc(title)}}}",
            r"\begin{itemize}[leftmargin=0.15in, label={}]",
            r"\small{\item{",
        ]
        rows = [
            rf"\textbf{{{esc(group.get('category') or '')}}}{{: {esc(group.get('skills') or '')}}}"
            for group in groups
        ]
        lines.append(" \\\\\n".join(rows))
        lines.append(r"}}")
        lines.append(r"\end{itemize}")
        doc.append(NoEscape("\n".join(lines)))

    # -- projects ----------------------------------------------------------

    def _add_projects(self, doc: Document, title: str, entries: list[ProjectEntry]) -> None:
        esc = self.escape
        lines = [rf"\section{{{esc(title)}}}", r"\entryListStart"]

        for entry in entries:
            heading = rf"\textbf{{{esc(entry.get('title') or '')}}}"
            techs = entry.get("technologies") or []
            if techs:
                heading += r" $|$ \emph{" + esc(", ".join(techs)) + "}"

            urls = (entry.get("github_url"), entry.get("live_url"))
            links = [self.link(url) for url in urls if url]
            lines.append(rf"\projectHeading{{{heading}}}{{{' '.join(links)}}}")
            lines.extend(self._item_list(entry.get("description")))

        lines.append(r"\entryListEnd")
        doc.append(NoEscape("\n".join(lines)))
