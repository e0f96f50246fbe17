"""Outcomes of an event link token aggregation.

An aggregation ends in exactly one of three shapes:

- ``LinkTokenSuccess``: every page was fetched and merged.
- ``LinkTokenPassThrough``: the upstream service rejected a page request
  with a structured body; the body is handed to the caller unchanged.
- ``LinkTokenFailure``: the outcome is indeterminate (no response, an empty
  error response, or an unreadable page). Callers treat it as failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from ..core.exceptions import LinkError
from .connections import ConnectionsPage


@dataclass(frozen=True)
class LinkTokenSuccess:
    data: ConnectionsPage

    ok: ClassVar[bool] = True

    def to_response(self) -> dict[str, Any]:
        return self.data.to_wire()


@dataclass(frozen=True)
class LinkTokenPassThrough:
    body: Any
    status_code: int | None = None

    ok: ClassVar[bool] = False

    def to_response(self) -> Any:
        return self.body


@dataclass(frozen=True)
class LinkTokenFailure:
    error: LinkError

    ok: ClassVar[bool] = False

    def to_response(self) -> None:
        return None


LinkTokenResult = Union[LinkTokenSuccess, LinkTokenPassThrough, LinkTokenFailure]
