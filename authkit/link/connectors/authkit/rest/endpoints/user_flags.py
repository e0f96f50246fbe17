"""Authkit user flags endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from authkit.link.connectors.authkit.config import USER_FLAGS_PATH
from authkit.link.core import ValidationError
from authkit.link.models import UserFlags
from authkit.link.runtime.rest import ResponseAdapter, RestEndpointSpec

SPEC = RestEndpointSpec(
    id="user_flags",
    method="GET",
    build_path=lambda _: USER_FLAGS_PATH,
    build_headers=lambda params: dict(params.get("headers") or {}),
)


class Adapter(ResponseAdapter):
    """Adapter for parsing the user flags document."""

    def parse(self, response: Any, params: dict[str, Any]) -> UserFlags:
        try:
            return UserFlags.model_validate(response)
        except PydanticValidationError as exc:
            raise ValidationError(f"Malformed user flags: {exc.error_count()} error(s)") from exc
