"""Test suite for the experience and position service."""

from __future__ import annotations

from datetime import date

import pytest

from portfolio_cms.data.db import get_session
from portfolio_cms.data.models import ExperiencePosition
from portfolio_cms.services import experience as experience_service
from portfolio_cms.services.errors import NotFoundError, ValidationError


def _position(title: str, start: date, **extra) -> dict:
    return {"title": title, "start_date": start, **extra}


@pytest.fixture
def acme(tmp_db):
    return experience_service.create_experience(
        {
            "company": "Acme",
            "location": "Remote",
            "positions": [
                _position("Engineer", date(2019, 1, 1), end_date=date(2021, 6, 30)),
                _position("Senior Engineer", date(2021, 7, 1), is_current=True),
            ],
        }
    )


def test_create_with_inline_positions(acme):
    assert acme["company"] == "Acme"
    assert [p["title"] for p in acme["positions"]] == ["Engineer", "Senior Engineer"]
    assert [p["order"] for p in acme["positions"]] == [0, 1]
    assert acme["is_current"] is True
    assert acme["positions"][0]["skills"] == []


def test_experience_without_current_position_is_not_current(tmp_db):
    past = experience_service.create_experience(
        {"company": "Old Co", "positions": [_position("Intern", date(2017, 5, 1))]}
    )
    assert past["is_current"] is False


def test_experiences_append_in_order(acme):
    second = experience_service.create_experience({"company": "Globex"})
    assert second["order"] == acme["order"] + 1
    assert [e["company"] for e in experience_service.list_experiences()] == ["Acme", "Globex"]


def test_create_requires_company(tmp_db):
    with pytest.raises(ValidationError, match="Experience company is required"):
        experience_service.create_experience({"company": ""})


def test_current_position_with_end_date_rejected(tmp_db):
    with pytest.raises(ValidationError, match="is_current"):
        experience_service.create_experience(
            {
                "company": "Acme",
                "positions": [
                    _position(
                        "Engineer", date(2020, 1, 1), is_current=True, end_date=date(2021, 1, 1)
                    )
                ],
            }
        )
    assert experience_service.list_experiences() == []


def test_position_end_before_start_rejected(acme):
    with pytest.raises(ValidationError, match="end_date cannot be before start_date"):
        experience_service.create_position(
            acme["id"], _position("Lead", date(2022, 1, 1), end_date=date(2021, 1, 1))
        )


def test_update_experience_keeps_positions(acme):
    updated = experience_service.update_experience(
        acme["id"], {"company": "Acme Corp", "location": "Berlin"}
    )
    assert updated["company"] == "Acme Corp"
    assert len(updated["positions"]) == 2


def test_missing_experience_raises_not_found(tmp_db):
    with pytest.raises(NotFoundError):
        experience_service.get_experience(404)
    with pytest.raises(NotFoundError):
        experience_service.create_position(404, _position("X", date(2020, 1, 1)))


class TestPositions:
    def test_create_appends_position(self, acme):
        position = experience_service.create_position(
            acme["id"], _position("Staff Engineer", date(2024, 1, 1), skills=["Go"])
        )
        assert position["order"] == 2
        assert position["experience_id"] == acme["id"]
        assert position["skills"] == ["Go"]

    def test_position_is_scoped_to_its_experience(self, acme):
        other = experience_service.create_experience({"company": "Globex"})
        position_id = acme["positions"][0]["id"]
        with pytest.raises(NotFoundError, match="Position"):
            experience_service.get_position(other["id"], position_id)
        with pytest.raises(NotFoundError):
            experience_service.delete_position(other["id"], position_id)

    def test_update_validates_merged_values(self, acme):
        current = acme["positions"][1]
        with pytest.raises(ValidationError, match="is_current"):
            experience_service.update_position(
                acme["id"], current["id"], {"end_date": date(2023, 1, 1)}
            )

        updated = experience_service.update_position(
            acme["id"],
            current["id"],
            {"is_current": False, "end_date": date(2023, 1, 1), "order": None},
        )
        assert updated["end_date"] == date(2023, 1, 1)
        assert updated["order"] == current["order"]
        assert experience_service.get_experience(acme["id"])["is_current"] is False

    def test_reorder_positions(self, acme):
        first, second = (p["id"] for p in acme["positions"])
        result = experience_service.reorder_positions(acme["id"], [second, first])
        assert [p["id"] for p in result] == [second, first]
        listed = experience_service.list_positions(acme["id"])
        assert [p["title"] for p in listed] == ["Senior Engineer", "Engineer"]

    def test_reorder_positions_requires_every_position(self, acme):
        with pytest.raises(ValidationError):
            experience_service.reorder_positions(acme["id"], [acme["positions"][0]["id"]])

    def test_delete_position(self, acme):
        experience_service.delete_position(acme["id"], acme["positions"][0]["id"])
        assert len(experience_service.list_positions(acme["id"])) == 1


def test_list_current_experiences_keeps_only_current_positions(acme):
    experience_service.create_experience(
        {"company": "Old Co", "positions": [_position("Intern", date(2017, 5, 1))]}
    )
    current = experience_service.list_current_experiences()
    assert [e["company"] for e in current] == ["Acme"]
    assert [p["title"] for p in current[0]["positions"]] == ["Senior Engineer"]


def test_reorder_experiences(acme):
    globex = experience_service.create_experience({"company": "Globex"})
    result = experience_service.reorder_experiences([globex["id"], acme["id"]])
    assert [e["company"] for e in result] == ["Globex", "Acme"]
    assert [e["order"] for e in result] == [0, 1]


def test_delete_experience_removes_positions(acme):
    position_id = acme["positions"][0]["id"]
    experience_service.delete_experience(acme["id"])

    assert experience_service.list_experiences() == []
    with get_session() as session:
        assert session.get(ExperiencePosition, position_id) is None
        assert session.query(ExperiencePosition).count() == 0
