"""Test suite for the flat portfolio record services."""

from __future__ import annotations

from datetime import date
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from portfolio_cms.services import records
from portfolio_cms.services.errors import NotFoundError, StoreError, ValidationError


def _skill(name: str, category: str = "Frontend", **extra) -> dict:
    return records.skills.create({"name": name, "category": category, **extra})


def test_list_is_empty_initially(tmp_db):
    assert records.skills.list_all() == []
    assert records.projects.list_all() == []


def test_create_appends_in_order(tmp_db):
    first = _skill("React")
    second = _skill("TypeScript")
    assert (first["order"], second["order"]) == (0, 1)
    assert [s["name"] for s in records.skills.list_all()] == ["React", "TypeScript"]
    assert second["level"] == 3


def test_list_ties_show_newest_first(tmp_db):
    _skill("Old", order=0)
    _skill("New", order=0)
    assert [s["name"] for s in records.skills.list_all()] == ["New", "Old"]


def test_create_rejects_missing_required_field(tmp_db):
    with pytest.raises(ValidationError, match="Skill name is required"):
        records.skills.create({"name": "  ", "category": "Frontend"})
    assert records.skills.list_all() == []


def test_skill_level_must_be_in_range(tmp_db):
    with pytest.raises(ValidationError, match="between 1 and 5"):
        _skill("Go", level=6)


def test_get_and_update(tmp_db):
    skill = _skill("Pyhton")
    updated = records.skills.update(
        skill["id"], {"name": "Python", "category": "Backend", "level": 5, "order": None}
    )
    assert updated["name"] == "Python"
    assert updated["category"] == "Backend"
    assert updated["order"] == skill["order"]
    assert records.skills.get(skill["id"])["level"] == 5


def test_update_and_delete_missing_record(tmp_db):
    with pytest.raises(NotFoundError):
        records.skills.update(999, {"name": "X", "category": "Y"})
    with pytest.raises(NotFoundError):
        records.skills.delete(999)
    with pytest.raises(NotFoundError):
        records.skills.get(999)


def test_delete(tmp_db):
    skill = _skill("React")
    records.skills.delete(skill["id"])
    assert records.skills.list_all() == []


class TestReorder:
    def test_reorder_rewrites_every_order(self, tmp_db):
        a, b, c = _skill("A"), _skill("B"), _skill("C")
        result = records.skills.reorder([c["id"], a["id"], b["id"]])
        assert [(s["name"], s["order"]) for s in result] == [("C", 0), ("A", 1), ("B", 2)]
        assert [s["name"] for s in records.skills.list_all()] == ["C", "A", "B"]

    def test_duplicates_rejected(self, tmp_db):
        a, b = _skill("A"), _skill("B")
        with pytest.raises(ValidationError, match="duplicate"):
            records.skills.reorder([a["id"], a["id"], b["id"]])

    def test_incomplete_list_rejected_and_nothing_written(self, tmp_db):
        a, b = _skill("A"), _skill("B")
        with pytest.raises(ValidationError, match="missing"):
            records.skills.reorder([b["id"]])
        assert [s["name"] for s in records.skills.list_all()] == ["A", "B"]

    def test_unknown_id_rejected(self, tmp_db):
        a = _skill("A")
        with pytest.raises(NotFoundError):
            records.skills.reorder([a["id"], 42])


class TestEducation:
    BASE = {
        "institution": "State University",
        "degree": "BSc",
        "start_date": date(2018, 9, 1),
    }

    def test_current_with_end_date_rejected(self, tmp_db):
        with pytest.raises(ValidationError, match="is_current"):
            records.education.create(
                {**self.BASE, "is_current": True, "end_date": date(2022, 5, 1)}
            )

    def test_end_before_start_rejected(self, tmp_db):
        with pytest.raises(ValidationError, match="end_date cannot be before start_date"):
            records.education.create({**self.BASE, "end_date": date(2017, 1, 1)})

    def test_update_applies_same_checks(self, tmp_db):
        edu = records.education.create({**self.BASE, "is_current": True})
        with pytest.raises(ValidationError):
            records.education.update(
                edu["id"], {**self.BASE, "is_current": True, "end_date": date(2022, 5, 1)}
            )
        assert records.education.get(edu["id"])["end_date"] is None


def test_certification_expiry_before_issue_rejected(tmp_db):
    with pytest.raises(ValidationError, match="expiry_date"):
        records.certifications.create(
            {
                "title": "AWS Developer",
                "issuer": "AWS",
                "issue_date": date(2023, 3, 1),
                "expiry_date": date(2022, 3, 1),
            }
        )


def test_project_json_list_round_trips(tmp_db):
    project = records.projects.create(
        {"title": "CMS", "technologies": ["Python", "FastAPI"], "featured": True}
    )
    fetched = records.projects.get(project["id"])
    assert fetched["technologies"] == ["Python", "FastAPI"]
    assert fetched["description"] == ""
    assert fetched["featured"] is True


def test_award_requires_date(tmp_db):
    with pytest.raises(ValidationError, match="Award date is required"):
        records.awards.create({"title": "MVP", "issuer": "Conf"})


def test_store_failure_becomes_store_error(tmp_db):
    with (
        patch(
            "portfolio_cms.services.store.get_session",
            side_effect=OperationalError("SELECT", {}, Exception("disk I/O error")),
        ),
        pytest.raises(StoreError, match="Failed to list Skill records"),
    ):
        records.skills.list_all()
