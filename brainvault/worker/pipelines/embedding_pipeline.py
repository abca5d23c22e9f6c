"""
Embedding pipeline.
Turns a freshly saved content item into a searchable one.

EMBEDDING ARCHITECTURE:
The request that saves an item never waits for the embedding provider.
The handler commits the row, answers, and hands the id to this pipeline:
- Runs after the response (FastAPI background task) or from the backfill worker
- Opens its own session; the request session is already closed
- Never raises: failures are logged and the item stays unembedded

Pipeline Stages:
1. LOAD: Fetch the item; a missing item (deleted in the meantime) is a no-op
2. VECTORIZATION: Embed "title + type hint", write it to the row and the index

After this pipeline completes:
- ContentItem.embedding is set
- The item's vector is in the index with payload {content_id, user_id, type}
- The item can appear in its owner's search results
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from ...shared.core.logging import get_logger
from ...shared.db.session import Database
from ...shared.repositories.content_repository import ContentRepository
from ...shared.services.embedding_service import EmbeddingService

logger = get_logger("embedding_pipeline")


@dataclass
class PipelineResult:
    """Result of the embedding pipeline."""

    success: bool
    content_id: str
    error_message: Optional[str] = None
    skipped: bool = False


class EmbeddingPipeline:
    """
    Embedding pipeline.

    Processes a ContentItem through:
    1. Load (own session)
    2. Vectorization (embedding generation and storage)
    """

    def __init__(self, database: Database, embedding_service: EmbeddingService):
        self.database = database
        self.embedding_service = embedding_service

    async def process(self, content_id: UUID) -> PipelineResult:
        """
        Embed one content item.

        Args:
            content_id: ID of the ContentItem to embed

        Returns:
            PipelineResult with success status
        """
        content_key = str(content_id)
        log = logger.bind(content_id=content_key)

        try:
            async with self.database.session_factory() as session:
                content = await ContentRepository(session).get(content_id)
                if not content:
                    log.info("Content not found, skipping embedding")
                    return PipelineResult(
                        success=False,
                        content_id=content_key,
                        error_message="Content not found",
                        skipped=True,
                    )

                stored = await self.embedding_service.generate_and_store_embedding(
                    session, content
                )
                await session.commit()

        except Exception as e:
            log.error("Embedding pipeline failed", error=str(e), error_type=type(e).__name__)
            return PipelineResult(success=False, content_id=content_key, error_message=str(e))

        if not stored:
            return PipelineResult(
                success=False,
                content_id=content_key,
                error_message="Content deleted before embedding was stored",
                skipped=True,
            )

        return PipelineResult(success=True, content_id=content_key)
