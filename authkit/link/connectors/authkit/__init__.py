"""Authkit service connector."""

from .config import CONNECTIONS_PATH, DEFAULT_PAGINATION, DEFAULT_TIMEOUT, USER_FLAGS_PATH
from .rest import AuthkitRESTConnector

__all__ = [
    "AuthkitRESTConnector",
    "CONNECTIONS_PATH",
    "DEFAULT_PAGINATION",
    "DEFAULT_TIMEOUT",
    "USER_FLAGS_PATH",
]
