"""Precise unit tests for HTTPClient.

Tests focus on session management, status handling and error translation.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from authkit.link.core import TransportError, UpstreamStatusError, ValidationError
from authkit.link.runtime.rest import HTTPClient


def make_response(status: int = 200, json_data=None, text: str = "", json_error=None):
    response = AsyncMock()
    response.status = status
    if json_error is not None:
        response.json = AsyncMock(side_effect=json_error)
    else:
        response.json = AsyncMock(return_value=json_data)
    response.text = AsyncMock(return_value=text)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def make_session(**methods) -> MagicMock:
    session = MagicMock()
    session.closed = False  # Important: session property checks this
    for name, value in methods.items():
        setattr(session, name, value)
    return session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None

    def test_init_strips_trailing_slash(self):
        client = HTTPClient(base_url="https://api.example.com/")
        assert client.base_url == "https://api.example.com"

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        await client.close()
        await client.close()  # Should not raise

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientRequests:
    """Test request building and successful responses."""

    @pytest.mark.asyncio
    async def test_get_with_base_url(self):
        client = HTTPClient(base_url="https://api.example.com")
        response = make_response(json_data={"authkitWhitelist": True})
        client._session = make_session(get=MagicMock(return_value=response))

        result = await client.get("/v1/users/flags", headers={"x-key": "k"})

        assert result == {"authkitWhitelist": True}
        client._session.get.assert_called_once_with(
            "https://api.example.com/v1/users/flags", params=None, headers={"x-key": "k"}
        )

    @pytest.mark.asyncio
    async def test_get_with_absolute_url(self):
        client = HTTPClient(base_url="https://api.example.com")
        response = make_response(json_data={})
        client._session = make_session(get=MagicMock(return_value=response))

        await client.get("https://other.com/test")

        call_args = client._session.get.call_args
        assert "https://other.com/test" in str(call_args)
        assert "api.example.com" not in str(call_args)

    @pytest.mark.asyncio
    async def test_post_sends_json_and_query(self):
        client = HTTPClient(base_url="https://api.example.com")
        response = make_response(json_data={"rows": []})
        client._session = make_session(post=MagicMock(return_value=response))

        result = await client.post(
            "/v1/authkit", json={"a": 1}, params={"limit": 100, "page": 2}, headers=None
        )

        assert result == {"rows": []}
        client._session.post.assert_called_once_with(
            "https://api.example.com/v1/authkit",
            json={"a": 1},
            params={"limit": 100, "page": 2},
            headers=None,
        )

    @pytest.mark.asyncio
    async def test_non_json_success_body(self):
        client = HTTPClient()
        response = make_response(json_error=ValueError("Expecting value"))
        client._session = make_session(get=MagicMock(return_value=response))

        with pytest.raises(ValidationError):
            await client.get("https://api.example.com/x")


class TestHTTPClientErrors:
    """Test translation of failures into library exceptions."""

    @pytest.mark.asyncio
    async def test_status_error_carries_json_body(self):
        client = HTTPClient()
        response = make_response(status=400, text='{"code": 400, "message": "bad group"}')
        client._session = make_session(post=MagicMock(return_value=response))

        with pytest.raises(UpstreamStatusError) as exc_info:
            await client.post("https://api.example.com/v1/authkit", json={})

        assert exc_info.value.status_code == 400
        assert exc_info.value.body == {"code": 400, "message": "bad group"}
        assert exc_info.value.has_body

    @pytest.mark.asyncio
    async def test_status_error_carries_text_body(self):
        client = HTTPClient()
        response = make_response(status=502, text="Bad Gateway")
        client._session = make_session(get=MagicMock(return_value=response))

        with pytest.raises(UpstreamStatusError) as exc_info:
            await client.get("https://api.example.com/v1/users/flags")

        assert exc_info.value.body == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_status_error_without_body(self):
        client = HTTPClient()
        response = make_response(status=503, text="")
        client._session = make_session(get=MagicMock(return_value=response))

        with pytest.raises(UpstreamStatusError) as exc_info:
            await client.get("https://api.example.com/v1/users/flags")

        assert exc_info.value.body is None
        assert not exc_info.value.has_body

    @pytest.mark.asyncio
    async def test_connection_error_becomes_transport_error(self):
        client = HTTPClient()
        client._session = make_session(
            post=MagicMock(side_effect=aiohttp.ClientConnectionError("connection refused"))
        )

        with pytest.raises(TransportError) as exc_info:
            await client.post("https://api.example.com/v1/authkit", json={})

        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_timeout_becomes_transport_error(self):
        client = HTTPClient()
        client._session = make_session(get=MagicMock(side_effect=asyncio.TimeoutError()))

        with pytest.raises(TransportError):
            await client.get("https://api.example.com/v1/users/flags")
