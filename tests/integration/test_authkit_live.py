"""Integration tests against a live authkit service."""

import os

import pytest

from authkit.link import AuthkitRESTConnector, EventLinkAPI, PaginationOptions

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_AUTHKIT_NETWORK_TESTS") != "1",
    reason="Requires network access to an authkit service",
)


class TestAuthkitLive:
    @pytest.mark.asyncio
    async def test_first_page(self, base_url, headers):
        async with AuthkitRESTConnector(base_url, headers=headers) as connector:
            page = await connector.fetch_page(1, 10)

        assert page.page == 1
        assert len(page.rows) <= 10
        assert page.request_id

    @pytest.mark.asyncio
    async def test_all_pages_match_total(self, base_url, headers):
        options = PaginationOptions(limit=10, max_concurrent_requests=2)
        async with AuthkitRESTConnector(base_url, headers=headers) as connector:
            merged = await connector.fetch_all_connections(options=options)

        assert merged.page == 1
        assert merged.pages == 1
        assert len(merged.rows) == merged.total

    @pytest.mark.asyncio
    async def test_event_link_token(self, base_url, headers):
        async with EventLinkAPI(base_url, headers=headers) as api:
            result = await api.create_event_link_token()

        assert result.to_response() is not None
        if result.ok:
            assert isinstance(result.data.is_whitelist, bool)
