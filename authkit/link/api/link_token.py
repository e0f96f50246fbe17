"""Event link token aggregation.

EventLinkAPI sequences the whitelist flag lookup and the full connections
pagination, then folds the outcome into one of the LinkTokenResult shapes
consumed by the token-issuance caller.

Architecture:
    - Flag lookup is best-effort: any failure yields ``False``
    - Pagination must succeed; its failure is translated, not raised:
        * upstream rejected a page with a body -> LinkTokenPassThrough
        * anything else the library raises     -> LinkTokenFailure
    - Programming errors (invalid options, bad payload type) propagate

Design Decisions:
    - Connector injection allows testing with mock transports
    - Context manager pattern ensures the HTTP session is closed
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from ..connectors.authkit import DEFAULT_PAGINATION, DEFAULT_TIMEOUT, AuthkitRESTConnector
from ..core.exceptions import LinkError, UpstreamStatusError
from ..models import (
    ConnectionsPage,
    LinkTokenFailure,
    LinkTokenPassThrough,
    LinkTokenResult,
    LinkTokenSuccess,
)
from ..runtime.pagination import PaginationOptions

logger = logging.getLogger(__name__)


class EventLinkAPI:
    """Facade producing event link token responses for one caller.

    Example:
        >>> async with EventLinkAPI("https://api.example.com", headers=headers) as api:
        ...     result = await api.create_event_link_token({"group": "g1"})
        ...     if result.ok:
        ...         rows = result.data.rows
    """

    def __init__(
        self,
        base_url: str,
        *,
        headers: Mapping[str, str] | None = None,
        options: PaginationOptions | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        connector: AuthkitRESTConnector | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        """Initialize the API.

        Args:
            base_url: Service base URL
            headers: Headers forwarded verbatim on every request
            options: Pagination options (defaults to DEFAULT_PAGINATION)
            timeout: Per-request timeout in seconds
            connector: Optional connector instance (creates a new one if not provided)
            sleep: Awaitable sleep used for retry backoff
        """
        self._options = options or DEFAULT_PAGINATION
        self._owns_connector = connector is None
        self._connector = connector or AuthkitRESTConnector(
            base_url, headers=headers, timeout=timeout
        )
        self._sleep = sleep
        self._closed = False

    async def fetch_whitelist_status(self) -> bool:
        """Whitelist flag for the caller; False when it cannot be determined."""
        return await self._connector.fetch_whitelist_status()

    async def fetch_all_connections(
        self, payload: Mapping[str, Any] | None = None
    ) -> ConnectionsPage:
        """Every connection row merged into one page. Errors propagate."""
        result = await self._connector.paginate(payload, self._options, sleep=self._sleep)
        return result.data

    async def create_event_link_token(
        self, payload: Mapping[str, Any] | None = None
    ) -> LinkTokenResult:
        """Build the event link token response.

        Args:
            payload: JSON body forwarded on every connections page request

        Returns:
            LinkTokenSuccess with the merged page and whitelist flag,
            LinkTokenPassThrough with the upstream error body, or
            LinkTokenFailure when the outcome is indeterminate
        """
        is_whitelist = await self.fetch_whitelist_status()

        try:
            connections = await self.fetch_all_connections(payload)
        except UpstreamStatusError as e:
            if e.has_body:
                logger.warning(
                    "Connections request rejected with status %s; passing body through",
                    e.status_code,
                )
                return LinkTokenPassThrough(body=e.body, status_code=e.status_code)
            logger.error("Connections request failed with status %s and no body", e.status_code)
            return LinkTokenFailure(error=e)
        except LinkError as e:
            logger.error("Connections request failed: %s", e)
            return LinkTokenFailure(error=e)

        return LinkTokenSuccess(data=connections.with_whitelist(is_whitelist))

    # --- Lifecycle -----------------------------------------------------------

    async def close(self) -> None:
        """Close the API and clean up resources."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing EventLinkAPI")
        if self._owns_connector:
            await self._connector.close()

    async def __aenter__(self) -> EventLinkAPI:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()


async def create_event_link_token(
    headers: Mapping[str, str],
    base_url: str,
    payload: Mapping[str, Any] | None = None,
    *,
    options: PaginationOptions | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> LinkTokenResult:
    """One-shot event link token aggregation with a short-lived session.

    Args:
        headers: Headers forwarded verbatim on every request
        base_url: Service base URL
        payload: JSON body forwarded on every connections page request
        options: Pagination options (limit 100, 3 concurrent, 3 attempts by default)
        timeout: Per-request timeout in seconds

    Returns:
        A LinkTokenResult; see EventLinkAPI.create_event_link_token
    """
    async with EventLinkAPI(
        base_url, headers=headers, options=options, timeout=timeout
    ) as api:
        return await api.create_event_link_token(payload)
