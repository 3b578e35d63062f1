"""Shared Pydantic types and schemas for the API."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    Field,
    HttpUrl,
    StringConstraints,
    TypeAdapter,
    ValidationError,
)

_HTTP_URL = TypeAdapter(HttpUrl)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _check_web_url(value: str | None) -> str | None:
    """Accept an absolute http(s) URL, returned exactly as submitted."""
    if value is None:
        return None
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError:
        raise ValueError("must be an absolute http(s):// URL") from None
    return value


def _check_asset_url(value: str | None) -> str | None:
    if value is not None and value.startswith("/") and not value.startswith("//"):
        return value
    try:
        return _check_web_url(value)
    except ValueError:
        raise ValueError(
            "must be an absolute http(s):// URL or a site path starting with '/'"
        ) from None


NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Links to external pages (GitHub, live demo, social profiles).
WebUrl = Annotated[str, AfterValidator(_check_web_url)]
OptionalWebUrl = Annotated[
    str | None, BeforeValidator(_blank_to_none), AfterValidator(_check_web_url)
]

# Images and icons may also be served from the site itself.
OptionalAssetUrl = Annotated[
    str | None, BeforeValidator(_blank_to_none), AfterValidator(_check_asset_url)
]


class ReorderRequest(BaseModel):
    """Full ordered list of record ids; each record's order becomes its index."""

    ids: list[int] = Field(..., description="Every record id, in the desired display order")


class ErrorResponse(BaseModel):
    """Body returned for every error response."""

    detail: Any = Field(description="Error message, or a list of field errors")
    reason: str = Field(description="Machine-readable error code")
