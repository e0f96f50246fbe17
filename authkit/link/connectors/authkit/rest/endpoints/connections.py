"""Authkit connections page endpoint definition and adapter.

One POST per page; the caller's payload travels as the JSON body and the
page window as query parameters.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from authkit.link.connectors.authkit.config import CONNECTIONS_PATH
from authkit.link.core import ValidationError
from authkit.link.models import ConnectionsPage
from authkit.link.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build the page window query, rejecting impossible windows before any I/O."""
    page = params["page"]
    limit = params["limit"]
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if limit <= 0:
        raise ValueError(f"limit must be > 0, got {limit}")
    return {"limit": limit, "page": page}


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    """Caller payload as a JSON object; an empty object when there is none."""
    payload = params.get("payload")
    if payload is None:
        return {}
    if isinstance(payload, BaseModel):
        return payload.model_dump(by_alias=True, exclude_none=True)
    if isinstance(payload, Mapping):
        return dict(payload)
    raise TypeError(f"payload must be a mapping or pydantic model, got {type(payload).__name__}")


def build_headers(params: dict[str, Any]) -> dict[str, str]:
    return dict(params.get("headers") or {})


# Endpoint specification
SPEC = RestEndpointSpec(
    id="connections",
    method="POST",
    build_path=lambda _: CONNECTIONS_PATH,
    build_query=build_query,
    build_body=build_body,
    build_headers=build_headers,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing one connections page."""

    def parse(self, response: Any, params: dict[str, Any]) -> ConnectionsPage:
        try:
            return ConnectionsPage.model_validate(response)
        except PydanticValidationError as exc:
            raise ValidationError(
                f"Malformed connections page {params.get('page')}: {exc.error_count()} error(s)"
            ) from exc
