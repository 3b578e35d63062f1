"""Shared dependencies for API routes."""

from __future__ import annotations

import os
from typing import Annotated

from fastapi import Header

from portfolio_cms.services.errors import ForbiddenError, UnauthorizedError

ADMIN_USERS_ENV = "PORTFOLIO_ADMIN_USERS"


def get_admin_users() -> frozenset[str]:
    """Return the configured admin allowlist (empty means any identity)."""
    raw = os.getenv(ADMIN_USERS_ENV, "")
    return frozenset(name.strip() for name in raw.split(",") if name.strip())


def get_current_username(
    x_username: Annotated[
        str | None,
        Header(
            description=(
                "Caller identity. In production, this should be extracted "
                "from an authenticated session/JWT token."
            )
        ),
    ] = None,
) -> str:
    """Get the caller identity from the request.

    Args:
        x_username: Identity from the X-Username header.

    Returns:
        str: The caller identity.

    Raises:
        UnauthorizedError: If the header is missing or blank (401).
    """
    if not x_username or not x_username.strip():
        raise UnauthorizedError("Missing authentication. Please provide X-Username header.")
    return x_username.strip()


def require_admin(
    x_username: Annotated[
        str | None,
        Header(description="Caller identity; must be an administrator."),
    ] = None,
) -> str:
    """Require an identity allowed to edit portfolio content.

    When ``PORTFOLIO_ADMIN_USERS`` is set, only the listed identities pass.

    Raises:
        UnauthorizedError: If no identity was supplied (401).
        ForbiddenError: If the identity is not on the allowlist (403).
    """
    username = get_current_username(x_username)
    admins = get_admin_users()
    if admins and username not in admins:
        raise ForbiddenError(f"User '{username}' is not allowed to modify portfolio content")
    return username
