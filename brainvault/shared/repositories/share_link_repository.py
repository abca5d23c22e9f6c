"""
ShareLink Repository

Share-link store: maps public hashes to vault owners.

Common Operations:
==================
- get_by_owner()     → The user's canonical (first) link
- get_by_hash()      → Resolve a public hash
- create_link()      → Store a new hash for a user
- delete_by_owner()  → Revoke every link of a user
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from brainvault.shared.models.share_link import ShareLink
from brainvault.shared.repositories.base import BaseRepository


class ShareLinkRepository(BaseRepository[ShareLink]):
    """Repository for ShareLink database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ShareLink, session)

    async def get_by_owner(self, owner_id: UUID) -> Optional[ShareLink]:
        """
        First link created for ``owner_id``.

        The schema allows several links per user; the oldest one is canonical.
        """
        result = await self.session.execute(
            select(ShareLink)
            .where(ShareLink.user_id == owner_id)
            .order_by(ShareLink.created_at)
            .limit(1)
        )
        return result.scalars().first()

    async def get_by_hash(self, share_hash: str) -> Optional[ShareLink]:
        """Resolve a public hash; the first match wins."""
        result = await self.session.execute(
            select(ShareLink).where(ShareLink.hash == share_hash).limit(1)
        )
        return result.scalars().first()

    async def create_link(self, owner_id: UUID, share_hash: str) -> ShareLink:
        return await self.create(user_id=owner_id, hash=share_hash)

    async def delete_by_owner(self, owner_id: UUID) -> int:
        """
        Remove all links of ``owner_id``.

        Returns:
            Number of links removed (0 is fine)
        """
        result = await self.session.execute(
            delete(ShareLink)
            .where(ShareLink.user_id == owner_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0
