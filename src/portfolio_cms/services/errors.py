"""Exceptions raised by the service layer.

Each error carries a short machine-readable ``reason`` that the API layer
returns alongside the HTTP status.
"""

from __future__ import annotations

__all__ = [
    "ForbiddenError",
    "NotFoundError",
    "PortfolioError",
    "RenderError",
    "StoreError",
    "UnauthorizedError",
    "ValidationError",
]


class PortfolioError(Exception):
    """Base class for all service errors."""

    reason = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PortfolioError):
    """A required field is missing or malformed."""

    reason = "validation_error"


class NotFoundError(PortfolioError):
    """An id does not resolve to a stored record."""

    reason = "not_found"

    def __init__(self, resource: str, record_id: int | str) -> None:
        super().__init__(f"{resource} {record_id} not found")
        self.resource = resource
        self.record_id = record_id


class UnauthorizedError(PortfolioError):
    """No caller identity was supplied."""

    reason = "unauthorized"


class ForbiddenError(PortfolioError):
    """The caller identity is not allowed to perform the action."""

    reason = "forbidden"


class StoreError(PortfolioError):
    """The underlying persistence layer failed."""

    reason = "store_error"


class RenderError(PortfolioError):
    """A resume document could not be produced (e.g. no LaTeX compiler)."""

    reason = "render_error"
