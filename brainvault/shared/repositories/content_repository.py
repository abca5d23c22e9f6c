"""
Content Repository

Content store: database operations specific to the ContentItem model.

Every read and delete that serves a request is scoped by ``user_id`` so one
user can never see or remove another user's items.

Common Operations:
==================
- create_item()               → New item, empty tags, embedding unset
- set_embedding()             → Write the vector in place (no-op if item is gone)
- list_by_owner()             → Owner's items, newest first
- get_many_for_owner()        → Hydrate search hits, scoped to the owner
- list_missing_embeddings()   → Items the backfill worker still has to embed
- delete_by_id_and_owner()    → Remove at most one item, silently
"""

from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from brainvault.shared.models.content import ContentItem
from brainvault.shared.models.enums import ContentType
from brainvault.shared.repositories.base import BaseRepository


class ContentRepository(BaseRepository[ContentItem]):
    """Repository for ContentItem database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ContentItem, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_item(
        self,
        link: str,
        content_type: ContentType,
        title: str,
        owner_id: UUID,
    ) -> ContentItem:
        """Create an item with no tags and no embedding."""
        return await self.create(
            link=link,
            type=content_type,
            title=title,
            user_id=owner_id,
            embedding=None,
        )

    async def set_embedding(self, content_id: UUID, vector: list[float]) -> bool:
        """
        Store the embedding for one item.

        Returns:
            True if a row was updated, False if the item no longer exists

        SQL Generated:
            UPDATE content SET embedding = '[...]' WHERE id = '...'
        """
        result = await self.session.execute(
            update(ContentItem)
            .where(ContentItem.id == content_id)
            .values(embedding=vector)
            .execution_options(synchronize_session=False)
        )
        return (result.rowcount or 0) > 0

    async def delete_by_id_and_owner(self, content_id: UUID, owner_id: UUID) -> bool:
        """
        Delete the item only if it belongs to ``owner_id``.

        Returns:
            True if an item was removed; False when nothing matched, which
            callers treat as success

        SQL Generated:
            DELETE FROM content WHERE id = '...' AND user_id = '...'
        """
        result = await self.session.execute(
            delete(ContentItem)
            .where(ContentItem.id == content_id, ContentItem.user_id == owner_id)
            .execution_options(synchronize_session=False)
        )
        return (result.rowcount or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_by_owner(self, owner_id: UUID) -> list[ContentItem]:
        """
        All items of one user, newest first, with owner and tags loaded.

        SQL Generated:
            SELECT * FROM content WHERE user_id = '...' ORDER BY created_at DESC
        """
        result = await self.session.execute(
            select(ContentItem)
            .where(ContentItem.user_id == owner_id)
            .options(selectinload(ContentItem.owner), selectinload(ContentItem.tags))
            .order_by(ContentItem.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_many_for_owner(
        self,
        content_ids: list[UUID],
        owner_id: UUID,
    ) -> list[ContentItem]:
        """
        Items among ``content_ids`` that belong to ``owner_id``.

        Order is unspecified; callers re-rank.
        """
        if not content_ids:
            return []

        result = await self.session.execute(
            select(ContentItem)
            .where(ContentItem.id.in_(content_ids), ContentItem.user_id == owner_id)
            .options(selectinload(ContentItem.owner), selectinload(ContentItem.tags))
        )
        return list(result.scalars().all())

    async def list_missing_embeddings(self, limit: int = 100) -> list[ContentItem]:
        """Oldest items whose embedding was never written."""
        result = await self.session.execute(
            select(ContentItem)
            .where(ContentItem.embedding.is_(None))
            .order_by(ContentItem.created_at)
            .limit(limit)
        )
        return list(result.scalars().all())
