"""High-level API for event link token responses."""

from .link_token import EventLinkAPI, create_event_link_token

__all__ = ["EventLinkAPI", "create_event_link_token"]
