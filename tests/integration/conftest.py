"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_AUTHKIT_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_AUTHKIT_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_AUTHKIT_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def base_url() -> str:
    url = os.environ.get("AUTHKIT_BASE_URL")
    if not url:
        pytest.skip("AUTHKIT_BASE_URL is not set")
    return url


@pytest.fixture
def headers() -> dict[str, str]:
    token = os.environ.get("AUTHKIT_AUTHORIZATION")
    return {"Authorization": token} if token else {}
