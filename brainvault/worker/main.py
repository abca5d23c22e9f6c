"""
Embedding backfill worker.

Run:
    python -m brainvault.worker.main --batch-size 100
    python -m brainvault.worker.main --content-id <uuid>
"""

import argparse
import asyncio
import sys
from typing import List, Optional
from uuid import UUID

from ..config.settings import settings
from ..shared.adapters.embedding_client import EmbeddingClient
from ..shared.adapters.vector_db import VectorDBAdapter
from ..shared.core.logging import get_logger
from ..shared.db.session import Database
from ..shared.services.embedding_service import EmbeddingService
from .pipelines.embedding_pipeline import EmbeddingPipeline
from .processors.embedding_processor import EmbeddingProcessor

logger = get_logger("worker")


def build_message(args: argparse.Namespace) -> dict:
    if args.content_id:
        return {"job_type": "embed_content", "content_id": args.content_id}
    return {"job_type": "backfill_embeddings", "batch_size": args.batch_size}


async def run(message: dict) -> bool:
    """Run one job; return whether it fully succeeded."""
    database = Database.from_settings(settings)
    embedding_client = EmbeddingClient()
    vector_db = VectorDBAdapter()

    try:
        if not await database.connect():
            return False

        pipeline = EmbeddingPipeline(database, EmbeddingService(embedding_client, vector_db))
        processor = EmbeddingProcessor(database, pipeline)
        result = await processor.process(message)
    finally:
        await embedding_client.close()
        await vector_db.close()
        await database.close()

    if message["job_type"] == "embed_content":
        return result.success
    return not result.failed


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Embed content items missing a vector")
    parser.add_argument("--batch-size", type=int, default=100, help="Items loaded per batch")
    parser.add_argument("--content-id", help="Embed a single item instead of backfilling")
    args = parser.parse_args(argv)
    if args.content_id:
        try:
            UUID(args.content_id)
        except ValueError:
            parser.error(f"--content-id is not a valid UUID: {args.content_id}")

    message = build_message(args)
    logger.info("Worker starting", job_type=message["job_type"])
    ok = asyncio.run(run(message))
    logger.info("Worker finished", success=ok)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
