"""Tests for the LaTeX resume templates.

Covers:
- Template registry
- Shared helpers (escape, date_span, link, strip_protocol)
- Typography settings (font size, spacing, theme)
- Section rendering and ordering
"""

from __future__ import annotations

import pytest

from portfolio_cms.services.resume import RESUME_TEMPLATES
from portfolio_cms.templates import get_template, list_templates
from portfolio_cms.templates.base import ResumeTemplate
from portfolio_cms.templates.classic import ClassicResumeTemplate
from portfolio_cms.templates.minimal import MinimalResumeTemplate
from portfolio_cms.templates.modern import ModernResumeTemplate


def _document(sections: list[dict], **style: str) -> dict:
    return {
        "title": "CV",
        "template": "modern",
        "theme": "light",
        "font_family": "inter",
        "font_size": "medium",
        "spacing": "normal",
        **style,
        "sections": sections,
    }


PERSONAL = {
    "kind": "personal",
    "title": "Personal Information",
    "content": {
        "name": "Jane Doe",
        "title": "Backend Engineer",
        "email": "jane@example.com",
        "phone": "555 0100",
        "website": "https://jane.dev/",
        "location": "Berlin",
        "bio": "Builds APIs.",
    },
}
EXPERIENCE = {
    "kind": "experience",
    "title": "Work Experience",
    "content": [
        {
            "company": "Acme R&D",
            "position": "Engineer",
            "location": "Remote",
            "start_date": "2021-07-01",
            "end_date": "",
            "is_current": True,
            "description": "Shipped the billing API\nCut latency by 40%",
        }
    ],
}
SKILLS = {
    "kind": "skills",
    "title": "Technical Skills",
    "content": [{"category": "Backend", "skills": "Python, SQL"}],
}
PROJECTS = {
    "kind": "projects",
    "title": "Projects",
    "content": [
        {
            "title": "Portfolio CMS",
            "description": "Content API",
            "technologies": ["Python", "FastAPI"],
            "github_url": "https://github.com/jane/cms",
            "live_url": "",
        }
    ],
}
EDUCATION = {
    "kind": "education",
    "title": "Education",
    "content": [
        {
            "institution": "State University",
            "degree": "BSc",
            "field": "Computer Science",
            "location": "Boston",
            "start_date": "2016-09-01",
            "end_date": "2020-05-01",
            "is_current": False,
        }
    ],
}


# ======================================================================
# Registry


class TestRegistry:
    def test_lists_all_templates(self):
        assert list_templates() == ["classic", "minimal", "modern"]

    @pytest.mark.parametrize(
        ("name", "cls"),
        [
            ("modern", ModernResumeTemplate),
            ("classic", ClassicResumeTemplate),
            ("minimal", MinimalResumeTemplate),
        ],
    )
    def test_get_template(self, name, cls):
        assert isinstance(get_template(name), cls)

    def test_unknown_template(self):
        with pytest.raises(ValueError, match="Unknown template 'fancy'"):
            get_template("fancy")

    def test_matches_stored_template_choices(self):
        assert list_templates() == sorted(RESUME_TEMPLATES)


# ======================================================================
# Helpers


class TestEscape:
    def test_special_characters(self):
        assert ResumeTemplate.escape("R&D 100% #1 $5 a_b") == r"R\&D 100\% \#1 \$5 a\_b"

    def test_backslash_tilde_caret(self):
        assert ResumeTemplate.escape("a\\b") == r"a\textbackslash{}b"
        assert ResumeTemplate.escape("~") == r"\textasciitilde{}"
        assert ResumeTemplate.escape("^") == r"\^{}"

    def test_plain_text_untouched(self):
        assert ResumeTemplate.escape("Hello World") == "Hello World"


class TestDateSpan:
    def test_full_range(self):
        result = ResumeTemplate.date_span("2018-08-01", "2021-05-31")
        assert result == "Aug. 2018 -- May 2021"

    def test_current(self):
        assert ResumeTemplate.date_span("2020-01-15", "", True) == "Jan. 2020 -- Present"

    def test_start_only(self):
        assert ResumeTemplate.date_span("2020-01-15", None) == "Jan. 2020"

    def test_year_only(self):
        assert ResumeTemplate.date_span("2019", "2020-13") == "2019 -- 2020"

    def test_empty(self):
        assert ResumeTemplate.date_span(None, None) == ""

    def test_non_date_text_shown_escaped(self):
        assert ResumeTemplate.date_span("Spring term", None) == "Spring term"
        assert ResumeTemplate.month_year("Q3 & Q4") == r"Q3 \& Q4"


class TestLink:
    def test_label_drops_scheme(self):
        link = ResumeTemplate.link("https://jane.dev/")
        assert link == r"\href{https://jane.dev/}{\underline{jane.dev}}"

    def test_mailto_label(self):
        link = ResumeTemplate.link("mailto:jane@example.com")
        assert link == r"\href{mailto:jane@example.com}{\underline{jane@example.com}}"

    def test_percent_and_hash_escaped_in_target(self):
        link = ResumeTemplate.link("https://jane.dev/my%20site#top")
        assert link.startswith(r"\href{https://jane.dev/my\%20site\#top}")
        assert r"\underline{jane.dev/my\%20site\#top}" in link

    def test_braces_encoded_in_target(self):
        assert ResumeTemplate.link("https://x.dev/{a}").startswith(r"\href{https://x.dev/%7Ba%7D}")


def test_strip_protocol():
    assert ResumeTemplate.strip_protocol("https://jane.dev/") == "jane.dev"
    assert ResumeTemplate.strip_protocol("http://example.com/a") == "example.com/a"


# ======================================================================
# Rendering


class TestTypography:
    def test_modern_uses_sans_serif(self):
        tex = get_template("modern").build(_document([PERSONAL])).dumps()
        assert r"\sfdefault" in tex
        assert "helvet" in tex

    def test_minimal_uses_monospace(self):
        tex = get_template("minimal").build(_document([PERSONAL])).dumps()
        assert r"\ttdefault" in tex

    def test_classic_rules_section_headings(self):
        tex = get_template("classic").build(_document([SKILLS])).dumps()
        assert r"\titlerule" in tex
        assert r"\sfdefault" not in tex

    @pytest.mark.parametrize(("size", "option"), [("small", "10pt"), ("large", "12pt")])
    def test_font_size_option(self, size, option):
        tex = get_template("modern").build(_document([PERSONAL], font_size=size)).dumps()
        assert option in tex.splitlines()[0]

    def test_spacing(self):
        tex = get_template("modern").build(_document([PERSONAL], spacing="compact")).dumps()
        assert r"\linespread{0.95}" in tex

    def test_dark_theme(self):
        dark = get_template("modern").build(_document([PERSONAL], theme="dark")).dumps()
        light = get_template("modern").build(_document([PERSONAL])).dumps()
        assert r"\pagecolor{black!90}" in dark
        assert r"\pagecolor" not in light


class TestSections:
    def test_personal_heading(self):
        tex = get_template("modern").build(_document([PERSONAL])).dumps()
        assert r"\Huge Jane Doe" in tex
        assert "Backend Engineer" in tex
        assert r"\href{mailto:jane@example.com}" in tex
        assert r"\underline{jane.dev}" in tex
        assert "Builds APIs." in tex

    def test_experience_entry(self):
        tex = get_template("modern").build(_document([EXPERIENCE])).dumps()
        assert r"\section{Work Experience}" in tex
        assert r"\entryHeading{Engineer}{Jul. 2021 -- Present}{Acme R\&D}{Remote}" in tex
        assert r"\entryItem{Shipped the billing API}" in tex
        assert r"\entryItem{Cut latency by 40\%}" in tex

    def test_education_entry(self):
        tex = get_template("classic").build(_document([EDUCATION])).dumps()
        assert "BSc in Computer Science" in tex
        assert "Sep. 2016 -- May 2020" in tex

    def test_skills_and_projects(self):
        tex = get_template("minimal").build(_document([SKILLS, PROJECTS])).dumps()
        assert r"\textbf{Backend}{: Python, SQL}" in tex
        assert r"\emph{Python, FastAPI}" in tex
        assert r"\underline{github.com/jane/cms}" in tex

    def test_sections_follow_document_order(self):
        tex = get_template("modern").build(_document([SKILLS, EXPERIENCE, EDUCATION])).dumps()
        positions = [
            tex.index(r"\section{Technical Skills}"),
            tex.index(r"\section{Work Experience}"),
            tex.index(r"\section{Education}"),
        ]
        assert positions == sorted(positions)

    def test_section_title_is_escaped(self):
        section = {**SKILLS, "title": "Tools & Tech"}
        tex = get_template("modern").build(_document([section])).dumps()
        assert r"\section{Tools \& Tech}" in tex

    def test_empty_section_is_skipped(self):
        section = {**PROJECTS, "content": []}
        tex = get_template("modern").build(_document([section])).dumps()
        assert r"\section{Projects}" not in tex

    def test_percent_encoded_urls_keep_document_balanced(self):
        website = "https://jane.dev/my%20site"
        personal = {**PERSONAL, "content": {**PERSONAL["content"], "website": website}}
        project = {
            **PROJECTS,
            "content": [{**PROJECTS["content"][0], "github_url": "https://github.com/j/p%2Fx"}],
        }
        tex = get_template("modern").build(_document([personal, project])).dumps()
        assert r"\href{https://jane.dev/my\%20site}" in tex
        assert r"\href{https://github.com/j/p\%2Fx}" in tex
        assert r"\end{center}" in tex
        # A bare % may only close a line, never comment out markup after it.
        for line in tex.splitlines():
            bare = line.replace(r"\%", "").rstrip()
            assert bare.find("%") in (-1, len(bare) - 1)
