from __future__ import annotations

from pathlib import Path

import pytest

import portfolio_cms.data.db as app_db
from portfolio_cms.data.db import init_db, reset_engine


@pytest.fixture(autouse=True)
def _no_admin_allowlist(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests run with any identity allowed unless they set the allowlist."""
    monkeypatch.delenv("PORTFOLIO_ADMIN_USERS", raising=False)


@pytest.fixture
def tmp_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Point the lazy engine at a temporary SQLite file."""
    db_path = tmp_path / "test.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    reset_engine()
    init_db()
    yield
    # Dispose engine to release connections
    reset_engine()


@pytest.fixture
def api_db(tmp_db: None) -> None:
    """Use a temporary SQLite DB for API tests."""
    assert app_db._engine is not None
    yield


@pytest.fixture(autouse=True)
def _api_db_for_api_tests(request: pytest.FixtureRequest) -> None:
    """Automatically apply the api_db fixture to tests in API test files."""
    # Check if test file name contains "api" (case-insensitive)
    test_file_path = Path(str(request.node.fspath))
    if "api" in test_file_path.stem.lower():
        request.getfixturevalue("api_db")
