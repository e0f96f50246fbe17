"""Connections page data model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ConnectionsPage(BaseModel):
    """One page of connector records, or the merged result of all pages.

    Upstream fields the model does not know about are kept so a single page
    can be handed back exactly as it was received.
    """

    rows: list[Any] = Field(default_factory=list)
    page: int = Field(..., ge=1)
    pages: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
    request_id: str = Field(..., alias="requestId")
    is_whitelist: bool | None = Field(default=None, alias="isWhiteList")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    @property
    def is_last_page(self) -> bool:
        """True when no further pages exist after this one."""
        return self.page >= self.pages

    def with_whitelist(self, is_whitelist: bool) -> ConnectionsPage:
        """Return a copy carrying the caller's whitelist flag."""
        return self.model_copy(update={"is_whitelist": is_whitelist})

    def to_wire(self) -> dict[str, Any]:
        """Serialize using upstream field names.

        ``isWhiteList`` is omitted until a flag has been attached.
        """
        data = self.model_dump(by_alias=True)
        if data.get("isWhiteList") is None:
            data.pop("isWhiteList", None)
        return data
