"""User feature flags model."""

from pydantic import BaseModel, ConfigDict, Field


class UserFlags(BaseModel):
    """Feature flags for the calling user. Only the whitelist flag is read."""

    authkit_whitelist: bool | None = Field(default=None, alias="authkitWhitelist")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
