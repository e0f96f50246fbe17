"""Upstream service connectors."""

from .authkit import AuthkitRESTConnector

__all__ = ["AuthkitRESTConnector"]
