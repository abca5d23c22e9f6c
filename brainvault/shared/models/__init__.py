"""
BrainVault SQLAlchemy Models

Model Hierarchy:
================
    User
       ├── content (ContentItem[])
       │      └── tags (Tag[], via content_tags)
       └── share_links (ShareLink[])

Models Overview:
================
- Base: Declarative base and timestamp mixin
- User: Registered vault owner
- ContentItem: Saved link with optional embedding
- ShareLink: Public hash exposing one user's vault
- Tag: Vestigial label referenced by content

Usage:
======
    from brainvault.shared.models import User, ContentItem, ShareLink
"""

from brainvault.shared.models.base import Base, TimestampMixin
from brainvault.shared.models.enums import ContentType
from brainvault.shared.models.user import User
from brainvault.shared.models.tag import Tag
from brainvault.shared.models.content import ContentItem, content_tags
from brainvault.shared.models.share_link import ShareLink

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "ContentType",
    # Models
    "User",
    "Tag",
    "ContentItem",
    "content_tags",
    "ShareLink",
]
