"""
Content Service

Business logic for a user's saved content.

EMBEDDING LIFECYCLE:
- create_content() stores the item with embedding = NULL
- The handler commits, answers, and schedules the EmbeddingPipeline
- The pipeline writes the vector once; nothing here waits for it

Usage:
======
    from brainvault.shared.services.content_service import ContentService

    service = ContentService(db, embedding_service)
    item = await service.create_content(user_id, link, ContentType.ARTICLE, title)
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from brainvault.shared.core.exceptions import InternalError
from brainvault.shared.core.logging import get_logger
from brainvault.shared.models.content import ContentItem
from brainvault.shared.models.enums import ContentType
from brainvault.shared.repositories.content_repository import ContentRepository
from brainvault.shared.services.embedding_service import EmbeddingService

logger = get_logger("content_service")


def parse_content_id(raw: str) -> Optional[UUID]:
    """UUID from client input, or None when it can't name any item."""
    try:
        return UUID(str(raw))
    except ValueError:
        return None


class ContentService:
    """
    Service for content-related business logic.

    Handles:
    - Saving new links
    - Listing the caller's items
    - Deleting the caller's items (and their vectors)
    """

    def __init__(
        self,
        session: AsyncSession,
        embedding_service: Optional[EmbeddingService] = None,
    ) -> None:
        self.session = session
        self.repo = ContentRepository(session)
        self.embedding_service = embedding_service

    async def create_content(
        self,
        owner_id: UUID,
        link: str,
        content_type: ContentType,
        title: str,
    ) -> ContentItem:
        """
        Save a link for ``owner_id`` with empty tags and no embedding.

        Raises:
            InternalError: Any persistence failure
        """
        try:
            item = await self.repo.create_item(
                link=link,
                content_type=content_type,
                title=title,
                owner_id=owner_id,
            )
        except Exception as e:
            logger.error(
                "Failed to add content",
                user_id=str(owner_id),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise InternalError("Failed to add content") from e

        logger.info("Content created", content_id=str(item.id), user_id=str(owner_id))
        return item

    async def list_content(self, owner_id: UUID) -> List[ContentItem]:
        """The caller's items, newest first, owner resolved."""
        return await self.repo.list_by_owner(owner_id)

    async def delete_content(self, owner_id: UUID, content_id: str) -> bool:
        """
        Delete one of the caller's items.

        Unknown, foreign or malformed ids match nothing and are not an error.

        Returns:
            True if an item was removed
        """
        parsed_id = parse_content_id(content_id)
        if parsed_id is None:
            return False

        deleted = await self.repo.delete_by_id_and_owner(parsed_id, owner_id)
        if not deleted:
            return False

        logger.info("Content deleted", content_id=content_id, user_id=str(owner_id))

        if self.embedding_service is not None:
            try:
                await self.embedding_service.delete_embedding(str(parsed_id))
            except Exception as e:
                # Orphaned vectors never surface: search re-checks rows by owner
                logger.warning(
                    "Failed to delete vector for content",
                    content_id=content_id,
                    error=str(e),
                )

        return True
