"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         ├── UserRepository             ← Credential store
         ├── ContentRepository          ← Content store (owner-scoped)
         └── ShareLinkRepository        ← Share-link store

Usage Example:
==============
    from brainvault.shared.repositories import ContentRepository

    repo = ContentRepository(db)
    items = await repo.list_by_owner(user_id)
"""

from brainvault.shared.repositories.base import BaseRepository
from brainvault.shared.repositories.user_repository import UserRepository
from brainvault.shared.repositories.content_repository import ContentRepository
from brainvault.shared.repositories.share_link_repository import ShareLinkRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "ContentRepository",
    "ShareLinkRepository",
]
