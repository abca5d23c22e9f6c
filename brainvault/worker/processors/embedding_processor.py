"""
Embedding job processor.

Job messages:
    {"job_type": "embed_content", "content_id": "<uuid>"}
    {"job_type": "backfill_embeddings", "batch_size": 100}
"""

from dataclasses import dataclass, field
from typing import List
from uuid import UUID

from ...shared.core.logging import get_logger
from ...shared.db.session import Database
from ...shared.repositories.content_repository import ContentRepository
from ..pipelines.embedding_pipeline import EmbeddingPipeline, PipelineResult
from .base_processor import BaseProcessor

logger = get_logger("embedding_processor")


@dataclass
class BackfillReport:
    """Outcome of one backfill run."""

    processed: int = 0
    succeeded: int = 0
    failed: List[str] = field(default_factory=list)


class EmbeddingProcessor(BaseProcessor):
    """Runs embedding jobs through the EmbeddingPipeline."""

    def __init__(self, database: Database, pipeline: EmbeddingPipeline):
        self.database = database
        self.pipeline = pipeline

    async def handle_embed(self, message: dict) -> PipelineResult:
        return await self.pipeline.process(UUID(str(message["content_id"])))

    async def handle_backfill(self, message: dict) -> BackfillReport:
        """
        Embed every item still missing a vector, oldest first.

        Items that fail stay unembedded and are reported, so one batch
        can't loop on them forever.
        """
        batch_size = int(message.get("batch_size", 100))
        report = BackfillReport()
        failed_ids = set()

        while True:
            async with self.database.session_factory() as session:
                pending = await ContentRepository(session).list_missing_embeddings(
                    limit=batch_size + len(failed_ids)
                )
            batch = [item.id for item in pending if item.id not in failed_ids][:batch_size]
            if not batch:
                break

            for content_id in batch:
                result = await self.pipeline.process(content_id)
                report.processed += 1
                if result.success:
                    report.succeeded += 1
                elif not result.skipped:
                    failed_ids.add(content_id)
                    report.failed.append(result.content_id)

        logger.info(
            "Embedding backfill finished",
            processed=report.processed,
            succeeded=report.succeeded,
            failed=len(report.failed),
        )
        return report
