"""
Embedding service - Vector embedding operations.

Provides:
- Embedding input text for a content item (title plus a type-specific hint)
- Embedding generation and storage (database column and vector index)
"""

from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from ..adapters.embedding_client import EmbeddingClient
from ..adapters.vector_db import VectorDBAdapter
from ..core.logging import get_logger
from ..models.content import ContentItem
from ..models.enums import ContentType
from ..repositories.content_repository import ContentRepository

logger = get_logger("embedding_service")


# Appended to the title so short titles land near their medium in vector space
CONTENT_TYPE_HINTS: Dict[ContentType, str] = {
    ContentType.YOUTUBE: "youtube video content tutorial",
    ContentType.ARTICLE: "article blog post written content",
    ContentType.TWITTER: "tweet social media post thread",
    ContentType.AUDIO: "audio podcast recording",
}


def build_content_prompt(title: str, content_type: ContentType) -> str:
    """
    Build the enriched prompt embedded for a content item.

    Example:
        build_content_prompt("FastAPI crash course", ContentType.YOUTUBE)
        # "FastAPI crash course youtube video content tutorial"
    """
    hint = CONTENT_TYPE_HINTS.get(ContentType(content_type), "")
    return f"{title} {hint}".strip()


class EmbeddingService:
    """
    Service for embedding operations.

    Handles:
    - Building embedding input text from a ContentItem
    - Generating embeddings through the embedding client
    - Writing the vector to the content row and to the vector index
    """

    def __init__(self, embedding_client: EmbeddingClient, vector_db: VectorDBAdapter):
        self.embedding_client = embedding_client
        self.vector_db = vector_db

    async def embed_text(self, text: str) -> List[float]:
        """Embed arbitrary text (search queries)."""
        return await self.embedding_client.embed(text)

    async def generate_and_store_embedding(
        self,
        session: AsyncSession,
        content: ContentItem,
    ) -> bool:
        """
        Embed one content item and persist the vector.

        Args:
            session: Session the content row update runs in (caller commits)
            content: Item to embed

        Returns:
            True if stored; False if the item disappeared before the write

        Raises:
            ProviderError: Embedding call failed
        """
        text = build_content_prompt(content.title, content.type)
        vector = await self.embedding_client.embed(text)

        repo = ContentRepository(session)
        if not await repo.set_embedding(content.id, vector):
            logger.info("Content deleted before embedding was stored", content_id=str(content.id))
            return False

        await self.vector_db.upsert(
            point_id=str(content.id),
            vector=vector,
            payload={
                "content_id": str(content.id),
                "user_id": str(content.user_id),
                "type": ContentType(content.type).value,
            },
        )

        logger.info(
            "Stored embedding for content",
            content_id=str(content.id),
            dimensions=len(vector),
        )
        return True

    async def delete_embedding(self, content_id: str) -> None:
        """Remove an item's vector from the index."""
        await self.vector_db.delete([content_id])
        logger.info("Deleted embedding for content", content_id=content_id)
