"""Tests for the HTTP client layer, run against the app in-process."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient

from portfolio_cms.api.main import app
from portfolio_cms.client import ApiError, PortfolioClient, get_api_url
from portfolio_cms.services.errors import StoreError


@pytest.fixture
def client() -> PortfolioClient:
    return PortfolioClient(username="admin", client=TestClient(app))


@pytest.fixture
def anonymous() -> PortfolioClient:
    return PortfolioClient(client=TestClient(app))


def test_api_url_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORTFOLIO_API_URL", "https://cms.example.com/")
    assert get_api_url() == "https://cms.example.com"
    monkeypatch.delenv("PORTFOLIO_API_URL")
    assert get_api_url() == "http://localhost:8000"


def test_singleton_round_trip(client: PortfolioClient) -> None:
    assert client.get_singleton("about") is None
    client.save_singleton("about", {"title": "About Me"})
    assert client.get_singleton("about")["title"] == "About Me"


def test_crud_helpers(client: PortfolioClient) -> None:
    first = client.create("skills", {"name": "Python", "category": "Backend"})
    second = client.create("skills", {"name": "SQL", "category": "Backend"})
    client.update("skills", first["id"], {"name": "Python 3", "category": "Backend"})
    client.reorder("skills", [second["id"], first["id"]])

    assert [s["name"] for s in client.list_records("skills")] == ["SQL", "Python 3"]
    client.delete("skills", second["id"])
    assert [s["name"] for s in client.list_records("skills")] == ["Python 3"]


def test_errors_carry_reason(client: PortfolioClient, anonymous: PortfolioClient) -> None:
    with pytest.raises(ApiError) as exc_info:
        client.update("projects", 404, {"title": "Missing"})
    assert exc_info.value.status_code == 404
    assert exc_info.value.reason == "not_found"

    with pytest.raises(ApiError) as exc_info:
        anonymous.create("skills", {"name": "Python", "category": "Backend"})
    assert exc_info.value.reason == "unauthorized"


@pytest.mark.parametrize(
    ("body", "detail"),
    [
        ({"content": b'["upstream", "down"]'}, ["upstream", "down"]),
        ({"content": b"Bad Gateway"}, "Bad Gateway"),
    ],
)
def test_non_object_error_body(body: dict, detail: object) -> None:
    def gateway(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, headers={"content-type": "application/json"}, **body)

    proxied = httpx.Client(base_url="http://cms.invalid", transport=httpx.MockTransport(gateway))
    with PortfolioClient(client=proxied) as portfolio_client:
        with pytest.raises(ApiError) as exc_info:
            portfolio_client.get_resume(1)

    assert exc_info.value.status_code == 502
    assert exc_info.value.detail == detail
    assert exc_info.value.reason == "error"


def test_positions_and_current(client: PortfolioClient) -> None:
    experience = client.create("experiences", {"company": "Acme"})
    client.create_position(
        experience["id"], {"title": "Engineer", "start_date": "2022-01-01", "is_current": True}
    )
    assert [p["title"] for p in client.list_positions(experience["id"])] == ["Engineer"]
    assert [e["company"] for e in client.current_experiences()] == ["Acme"]


def test_resume_helpers(client: PortfolioClient) -> None:
    client.save_singleton("overview", {"first_name": "Jane", "last_name": "Doe"})
    resume = client.resume_from_portfolio("Generated", template="minimal")

    assert resume["template"] == "minimal"
    assert client.get_resume(resume["id"])["title"] == "Generated"
    assert "Jane Doe" in client.resume_tex(resume["id"])


class TestFetchPortfolio:
    def test_loads_every_resource(self, client: PortfolioClient) -> None:
        client.save_singleton("overview", {"first_name": "Jane", "last_name": "Doe"})
        client.create("awards", {"title": "MVP", "issuer": "Conf", "date": "2023-09-15"})

        portfolio = client.fetch_portfolio()

        assert portfolio["overview"]["first_name"] == "Jane"
        assert portfolio["about"] is None
        assert portfolio["social_links"] == []
        assert [a["title"] for a in portfolio["awards"]] == ["MVP"]

    def test_failing_resource_degrades_to_empty(self, client: PortfolioClient) -> None:
        client.create("skills", {"name": "Python", "category": "Backend"})
        with patch(
            "portfolio_cms.services.records.awards.list_all",
            side_effect=StoreError("Failed to list Award records"),
        ):
            portfolio = client.fetch_portfolio()

        assert portfolio["awards"] == []
        assert [s["name"] for s in portfolio["skills"]] == ["Python"]

    def test_unreachable_api(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        offline = httpx.Client(base_url="http://cms.invalid", transport=httpx.MockTransport(refuse))
        with PortfolioClient(client=offline) as portfolio_client:
            portfolio = portfolio_client.fetch_portfolio()

        assert portfolio["overview"] is None
        assert portfolio["settings"] is None
        assert portfolio["projects"] == []
        assert portfolio["experiences"] == []
