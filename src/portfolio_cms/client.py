"""HTTP client for the Portfolio CMS API.

Wraps :class:`httpx.Client` with one helper per resource. Non-2xx responses
raise :class:`ApiError` carrying the server's ``reason`` code.

:meth:`PortfolioClient.fetch_portfolio` loads every public resource for a
page render. A resource that fails to load degrades to its empty value
(``None`` for singletons, ``[]`` for collections) instead of failing the
whole page.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from typing import Any

import httpx

logger = logging.getLogger(__name__)

__all__ = ["ApiError", "PortfolioClient", "get_api_url"]

DEFAULT_API_URL = "http://localhost:8000"

# resource path -> value used when it cannot be loaded
_PUBLIC_RESOURCES: dict[str, Any] = {
    "overview": None,
    "about": None,
    "settings": None,
    "skills": [],
    "social-links": [],
    "projects": [],
    "experiences": [],
    "education": [],
    "awards": [],
    "certifications": [],
}


def get_api_url() -> str:
    """Return the API base URL from ``PORTFOLIO_API_URL``."""
    return os.getenv("PORTFOLIO_API_URL", DEFAULT_API_URL).rstrip("/")


class ApiError(Exception):
    """The API answered with an error status."""

    def __init__(self, status_code: int, detail: Any, reason: str = "error") -> None:
        super().__init__(f"{status_code} {reason}: {detail}")
        self.status_code = status_code
        self.detail = detail
        self.reason = reason


class PortfolioClient:
    """Synchronous client for the ``/api`` endpoints.

    Args:
        base_url: API root; defaults to :func:`get_api_url`.
        username: Identity sent as ``X-Username`` (needed for writes and
            every resume endpoint).
        client: Pre-built ``httpx.Client`` (e.g. a FastAPI ``TestClient``);
            when given, *base_url* is ignored.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        username: str | None = None,
        client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        headers = {"X-Username": username} if username else {}
        if client is None:
            client = httpx.Client(base_url=base_url or get_api_url(), timeout=timeout)
            self._owns_client = True
        else:
            self._owns_client = False
        self._client = client
        self._headers = headers

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> PortfolioClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # transport
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        response = self._client.request(method, f"/api/{path}", headers=self._headers, **kwargs)
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {"detail": response.text}
            if not isinstance(body, dict):
                body = {"detail": body}
            raise ApiError(
                response.status_code,
                body.get("detail", response.reason_phrase),
                body.get("reason", "error"),
            )
        return response

    def _json(self, method: str, path: str, **kwargs: Any) -> Any:
        response = self._request(method, path, **kwargs)
        if response.status_code == httpx.codes.NO_CONTENT:
            return None
        return response.json()

    # ------------------------------------------------------------------
    # generic resource helpers
    # ------------------------------------------------------------------

    def list_records(self, resource: str) -> list[dict[str, Any]]:
        return self._json("GET", resource)

    def get_singleton(self, resource: str) -> dict[str, Any] | None:
        """Return a singleton (overview/about/settings) or None when unset."""
        return self._json("GET", resource) or None

    def save_singleton(self, resource: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._json("PUT", resource, json=data)

    def create(self, resource: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._json("POST", resource, json=data)

    def update(self, resource: str, record_id: int, data: dict[str, Any]) -> dict[str, Any]:
        return self._json("PUT", f"{resource}/{record_id}", json=data)

    def delete(self, resource: str, record_id: int) -> None:
        self._json("DELETE", f"{resource}/{record_id}")

    def reorder(self, resource: str, ids: Sequence[int]) -> list[dict[str, Any]]:
        """Commit a full drag-and-drop order for *resource* (e.g. ``skills``)."""
        return self._json("PUT", f"{resource}/order", json={"ids": list(ids)})

    # ------------------------------------------------------------------
    # experiences
    # ------------------------------------------------------------------

    def current_experiences(self) -> list[dict[str, Any]]:
        return self._json("GET", "experiences/current")

    def list_positions(self, experience_id: int) -> list[dict[str, Any]]:
        return self._json("GET", f"experiences/{experience_id}/positions")

    def create_position(self, experience_id: int, data: dict[str, Any]) -> dict[str, Any]:
        return self._json("POST", f"experiences/{experience_id}/positions", json=data)

    def update_position(
        self, experience_id: int, position_id: int, data: dict[str, Any]
    ) -> dict[str, Any]:
        return self._json(
            "PUT", f"experiences/{experience_id}/positions/{position_id}", json=data
        )

    def delete_position(self, experience_id: int, position_id: int) -> None:
        self._json("DELETE", f"experiences/{experience_id}/positions/{position_id}")

    def reorder_positions(self, experience_id: int, ids: Sequence[int]) -> list[dict[str, Any]]:
        return self.reorder(f"experiences/{experience_id}/positions", ids)

    # ------------------------------------------------------------------
    # resumes
    # ------------------------------------------------------------------

    def get_resume(self, resume_id: int) -> dict[str, Any]:
        return self._json("GET", f"resumes/{resume_id}")

    def resume_from_portfolio(
        self, title: str, include: Sequence[str] | None = None, **style: str
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"title": title, **style}
        if include is not None:
            body["include"] = list(include)
        return self._json("POST", "resumes/from-portfolio", json=body)

    def resume_tex(self, resume_id: int) -> str:
        return self._request("GET", f"resumes/{resume_id}/tex").text

    def resume_pdf(self, resume_id: int) -> bytes:
        return self._request("GET", f"resumes/{resume_id}/pdf").content

    # ------------------------------------------------------------------
    # page aggregation
    # ------------------------------------------------------------------

    def fetch_portfolio(self) -> dict[str, Any]:
        """Load every public resource, degrading failures to empty values.

        Returns:
            A mapping keyed by resource name (``social-links`` becomes
            ``social_links``).
        """
        portfolio: dict[str, Any] = {}
        for resource, empty in _PUBLIC_RESOURCES.items():
            key = resource.replace("-", "_")
            try:
                if empty is None:
                    portfolio[key] = self.get_singleton(resource)
                else:
                    portfolio[key] = self.list_records(resource)
            except (ApiError, httpx.HTTPError) as exc:
                logger.warning("Could not load %s: %s", resource, exc)
                portfolio[key] = None if empty is None else []
        return portfolio
