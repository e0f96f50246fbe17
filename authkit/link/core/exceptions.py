"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class LinkError(Exception):
    """Base exception for all library errors."""

    pass


class ProviderError(LinkError):
    """Error from the upstream connections service."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(ProviderError):
    """Request never produced an HTTP response.

    Raised for connection failures, DNS failures and timeouts. There is no
    upstream body to hand back to the caller.
    """

    pass


class UpstreamStatusError(ProviderError):
    """Upstream answered with a non-2xx status.

    ``body`` holds the decoded response body (JSON when possible, otherwise
    text) or None when the response was empty.
    """

    def __init__(self, message: str, status_code: int, body: Any = None) -> None:
        super().__init__(message, status_code=status_code)
        self.body = body

    @property
    def has_body(self) -> bool:
        return self.body is not None


class ValidationError(LinkError):
    """Response body did not match the expected shape."""

    pass
