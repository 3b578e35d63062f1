"""Tests for typed resume section content."""

from __future__ import annotations

import json
from datetime import date

import pytest

from portfolio_cms.services.errors import ValidationError
from portfolio_cms.services.section_content import (
    ExperienceItem,
    PersonalContent,
    SectionKind,
    SkillGroup,
    UnparseableContent,
    normalize_content,
    normalize_date,
    parse_content,
    serialize_content,
    validate_content,
)

SAMPLES = {
    SectionKind.PERSONAL: {"name": "Jane Doe", "email": "jane@example.com"},
    SectionKind.EXPERIENCE: [
        {"company": "Acme", "position": "Engineer", "start_date": "2021-03-01", "is_current": True}
    ],
    SectionKind.EDUCATION: [{"institution": "State U", "degree": "BSc", "field": "CS"}],
    SectionKind.SKILLS: [{"category": "Frontend", "skills": "React, TypeScript"}],
    SectionKind.PROJECTS: [{"title": "CMS", "technologies": ["Python", "FastAPI"]}],
}


class TestSerialize:
    def test_writes_only_supplied_fields(self):
        text = serialize_content("personal", {"name": "Jane"})
        assert json.loads(text) == {"name": "Jane"}

    def test_dates_become_iso_strings(self):
        text = serialize_content(
            "experience", [{"company": "Acme", "start_date": date(2020, 1, 15)}]
        )
        assert json.loads(text)[0]["start_date"] == "2020-01-15"

    def test_unknown_keys_are_kept(self):
        text = serialize_content("skills", [{"category": "Tools", "skills": "Git", "icon": "x"}])
        assert json.loads(text) == [{"category": "Tools", "skills": "Git", "icon": "x"}]

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError, match="Unknown section kind"):
            serialize_content("hobbies", [])

    def test_shape_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="experience"):
            serialize_content("experience", [{"position": "Engineer"}])

    def test_personal_must_be_an_object(self):
        with pytest.raises(ValidationError):
            serialize_content("personal", ["not", "an", "object"])

    @pytest.mark.parametrize("kind", list(SectionKind))
    def test_serialize_parse_serialize_is_stable(self, kind):
        first = serialize_content(kind, SAMPLES[kind])
        parsed = parse_content(kind, first)
        assert not isinstance(parsed, UnparseableContent)
        assert serialize_content(kind, parsed) == first


class TestParse:
    def test_parses_typed_variant(self):
        parsed = parse_content("personal", '{"name": "Jane"}')
        assert isinstance(parsed, PersonalContent)
        assert parsed.name == "Jane"

    def test_parses_list_variant(self):
        parsed = parse_content("experience", '[{"company": "Acme"}]')
        assert isinstance(parsed[0], ExperienceItem)
        assert parsed[0].is_current is False

    def test_invalid_json_is_unparseable(self):
        parsed = parse_content("skills", "not json at all")
        assert isinstance(parsed, UnparseableContent)
        assert parsed.raw == "not json at all"

    def test_wrong_shape_is_unparseable(self):
        parsed = parse_content("skills", '{"category": "Frontend"}')
        assert isinstance(parsed, UnparseableContent)
        assert parsed.raw == '{"category": "Frontend"}'

    def test_unknown_kind_is_unparseable(self):
        parsed = parse_content("hobbies", "[]")
        assert isinstance(parsed, UnparseableContent)
        assert "hobbies" in parsed.error


class TestSkillGroup:
    def test_skill_names_splits_and_trims(self):
        group = SkillGroup(category="Backend", skills=" Python ,FastAPI,, SQL ")
        assert group.skill_names() == ["Python", "FastAPI", "SQL"]

    def test_validate_content_returns_models(self):
        groups = validate_content("skills", [{"category": "Backend"}])
        assert groups[0].skills == ""


class TestNormalizeDate:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ""),
            ("", ""),
            ("2023-01-15", "2023-01-15"),
            ("2023-01-15T10:00:00Z", "2023-01-15"),
            ("2023-01-15T00:00:00.000Z", "2023-01-15"),
            ("2023-01-15T23:30:00-05:00", "2023-01-16"),
            ("Present", "Present"),
        ],
    )
    def test_normalize_date(self, value, expected):
        assert normalize_date(value) == expected


class TestNormalizeContent:
    def test_experience_dates_are_normalized(self):
        data = [{"company": "Acme", "start_date": "2020-02-01T00:00:00Z", "end_date": None}]
        assert normalize_content("experience", data) == [
            {"company": "Acme", "start_date": "2020-02-01", "end_date": ""}
        ]

    def test_education_dates_are_normalized(self):
        data = [{"institution": "State U", "start_date": "2018-09-01T00:00:00.000Z"}]
        result = normalize_content(SectionKind.EDUCATION, data)
        assert result[0]["start_date"] == "2018-09-01"
        assert result[0]["end_date"] == ""

    def test_other_kinds_untouched(self):
        data = [{"title": "CMS", "start_date": "2020-02-01T00:00:00Z"}]
        assert normalize_content("projects", data) is data

    def test_input_not_mutated(self):
        data = [{"company": "Acme", "start_date": "2020-02-01T00:00:00Z"}]
        normalize_content("experience", data)
        assert data[0]["start_date"] == "2020-02-01T00:00:00Z"
