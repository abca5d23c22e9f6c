"""
Share-link schemas.
"""

from typing import List

from pydantic import BaseModel, Field

from brainvault.shared.schemas.content import ContentItemResponse


class ShareRequest(BaseModel):
    """Turn public sharing of the caller's vault on or off."""

    share: bool = Field(description="True to enable sharing, False to revoke it")


class ShareHashResponse(BaseModel):
    """Hash to append to /brain/ when sharing is enabled."""

    hash: str


class SharedVaultResponse(BaseModel):
    """Public, read-only view of a shared vault."""

    username: str
    content: List[ContentItemResponse]
