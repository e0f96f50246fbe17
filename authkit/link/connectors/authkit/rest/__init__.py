"""Authkit REST connector and endpoints."""

from .provider import AuthkitRESTConnector

__all__ = ["AuthkitRESTConnector"]
