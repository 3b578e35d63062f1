"""Tests for the public portfolio API: singletons, flat records and auth."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from portfolio_cms.api.main import app, get_cors_origins

ADMIN = {"X-Username": "admin"}


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


# ======================================================================
# Singletons


class TestSingletons:
    @pytest.mark.parametrize("resource", ["overview", "about", "settings"])
    def test_get_before_save_returns_empty_object(self, client: TestClient, resource: str) -> None:
        response = client.get(f"/api/{resource}")
        assert response.status_code == 200
        assert response.json() == {}

    def test_post_then_put_upserts_single_row(self, client: TestClient) -> None:
        created = client.post(
            "/api/overview", json={"first_name": "Jane", "last_name": "Doe"}, headers=ADMIN
        )
        assert created.status_code == 200
        updated = client.put(
            "/api/overview",
            json={"first_name": "Jane", "last_name": "Smith", "keywords": ["python"]},
            headers=ADMIN,
        )
        assert updated.json()["id"] == created.json()["id"] == 1

        fetched = client.get("/api/overview").json()
        assert fetched["last_name"] == "Smith"
        assert fetched["keywords"] == ["python"]

    def test_settings_theme_is_validated(self, client: TestClient) -> None:
        response = client.put(
            "/api/settings", json={"site_title": "Site", "theme": "neon"}, headers=ADMIN
        )
        assert response.status_code == 422

    def test_about_save(self, client: TestClient) -> None:
        response = client.put(
            "/api/about", json={"title": "About Me", "content": "# Hi"}, headers=ADMIN
        )
        assert response.status_code == 200
        assert client.get("/api/about").json()["content"] == "# Hi"


# ======================================================================
# Authentication


class TestAuth:
    def test_reads_are_anonymous(self, client: TestClient) -> None:
        assert client.get("/api/projects").status_code == 200

    def test_missing_identity(self, client: TestClient) -> None:
        response = client.put("/api/about", json={"title": "About"})
        assert response.status_code == 401
        assert response.json()["reason"] == "unauthorized"

    def test_blank_identity(self, client: TestClient) -> None:
        response = client.put("/api/about", json={"title": "About"}, headers={"X-Username": " "})
        assert response.status_code == 401

    def test_allowlist(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORTFOLIO_ADMIN_USERS", "alice, bob")

        denied = client.put("/api/about", json={"title": "About"}, headers={"X-Username": "eve"})
        assert denied.status_code == 403
        assert denied.json()["reason"] == "forbidden"

        allowed = client.put(
            "/api/about", json={"title": "About"}, headers={"X-Username": "bob"}
        )
        assert allowed.status_code == 200


# ======================================================================
# Flat records


class TestFlatRecords:
    def test_project_crud(self, client: TestClient) -> None:
        created = client.post(
            "/api/projects",
            json={
                "title": "CMS",
                "technologies": ["Python"],
                "github_url": "https://github.com/jane/cms",
                "image_url": "/images/cms.webp",
            },
            headers=ADMIN,
        )
        assert created.status_code == 201
        project_id = created.json()["id"]

        updated = client.put(
            f"/api/projects/{project_id}",
            json={"title": "Portfolio CMS", "featured": True},
            headers=ADMIN,
        )
        assert updated.json()["featured"] is True
        assert updated.json()["technologies"] == []

        assert client.delete(f"/api/projects/{project_id}", headers=ADMIN).status_code == 204
        assert client.get("/api/projects").json() == []

    def test_link_url_must_be_http(self, client: TestClient) -> None:
        response = client.post(
            "/api/social-links",
            json={"platform": "github", "url": "github.com/jane"},
            headers=ADMIN,
        )
        assert response.status_code == 422
        assert response.json()["reason"] == "validation_error"

    @pytest.mark.parametrize(
        "url",
        ["https://", "http://not a url", "ftp://github.com/jane", "//cdn.example.com/x.png"],
    )
    def test_project_rejects_malformed_urls(self, client: TestClient, url: str) -> None:
        response = client.post(
            "/api/projects",
            json={"title": "CMS", "github_url": url, "image_url": url},
            headers=ADMIN,
        )
        assert response.status_code == 422
        fields = {error["loc"][-1] for error in response.json()["detail"]}
        assert fields == {"github_url", "image_url"}

    def test_site_path_only_allowed_for_assets(self, client: TestClient) -> None:
        response = client.post(
            "/api/projects",
            json={"title": "CMS", "github_url": "/jane/cms"},
            headers=ADMIN,
        )
        assert response.status_code == 422

    def test_url_kept_as_submitted(self, client: TestClient) -> None:
        response = client.post(
            "/api/projects",
            json={"title": "CMS", "live_url": "https://Jane.dev"},
            headers=ADMIN,
        )
        assert response.status_code == 201
        assert response.json()["live_url"] == "https://Jane.dev"

    def test_social_link_created(self, client: TestClient) -> None:
        response = client.post(
            "/api/social-links",
            json={"platform": "github", "url": "https://github.com/jane"},
            headers=ADMIN,
        )
        assert response.status_code == 201
        assert response.json()["is_active"] is True

    def test_education_current_with_end_date(self, client: TestClient) -> None:
        response = client.post(
            "/api/education",
            json={
                "institution": "State University",
                "degree": "BSc",
                "start_date": "2020-09-01",
                "end_date": "2024-05-01",
                "is_current": True,
            },
            headers=ADMIN,
        )
        assert response.status_code == 422
        assert "is_current" in response.json()["detail"]

    def test_invalid_date_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/awards",
            json={"title": "MVP", "issuer": "Conf", "date": "15/09/2023"},
            headers=ADMIN,
        )
        assert response.status_code == 422

    def test_certification_dates(self, client: TestClient) -> None:
        response = client.post(
            "/api/certifications",
            json={
                "title": "AWS Developer",
                "issuer": "AWS",
                "issue_date": "2023-03-01",
                "expiry_date": "2026-03-01",
            },
            headers=ADMIN,
        )
        assert response.status_code == 201
        assert response.json()["expiry_date"] == "2026-03-01"


def test_cors_origins_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORTFOLIO_CORS_ORIGINS", "https://a.dev, https://b.dev")
    assert get_cors_origins() == ["https://a.dev", "https://b.dev"]
    monkeypatch.setenv("PORTFOLIO_CORS_ORIGINS", "")
    assert get_cors_origins() == ["*"]
