"""Tests for the background embedding pipeline and the backfill processor."""

import uuid

import pytest

from brainvault.shared.models.enums import ContentType
from brainvault.shared.repositories.content_repository import ContentRepository
from brainvault.shared.repositories.user_repository import UserRepository
from brainvault.worker.pipelines.embedding_pipeline import EmbeddingPipeline
from brainvault.worker.processors.embedding_processor import EmbeddingProcessor


async def _create_item(database, title="python tips", content_type=ContentType.ARTICLE):
    async with database.session_factory() as session:
        user = await UserRepository(session).create(
            username=f"u{uuid.uuid4().hex[:6]}", password_hash="x"
        )
        item = await ContentRepository(session).create_item(
            link="http://x", content_type=content_type, title=title, owner_id=user.id
        )
        await session.commit()
        return item.id, user.id


async def _load(database, content_id):
    async with database.session_factory() as session:
        return await ContentRepository(session).get(content_id)


@pytest.fixture
def pipeline(database, embedding_service):
    return EmbeddingPipeline(database, embedding_service)


async def test_process_stores_vector_in_row_and_index(pipeline, database, vector_db, embedding_client):
    content_id, user_id = await _create_item(database)

    result = await pipeline.process(content_id)

    assert result.success
    assert result.content_id == str(content_id)
    assert embedding_client.calls == ["python tips article blog post written content"]

    item = await _load(database, content_id)
    assert item.embedding == [1.0, 0.0, 0.0, 0.01]

    hits = await vector_db.search([1.0, 0.0, 0.0, 0.01], user_id=str(user_id))
    assert [uuid.UUID(hit.id) for hit in hits] == [content_id]
    assert hits[0].payload == {
        "content_id": str(content_id),
        "user_id": str(user_id),
        "type": "article",
    }


async def test_missing_item_is_skipped(pipeline, embedding_client):
    result = await pipeline.process(uuid.uuid4())

    assert not result.success
    assert result.skipped
    assert embedding_client.calls == []


async def test_provider_failure_is_captured_not_raised(pipeline, database, embedding_client):
    content_id, _ = await _create_item(database)
    embedding_client.fail = True

    result = await pipeline.process(content_id)

    assert not result.success
    assert not result.skipped
    assert "timed out" in result.error_message
    assert (await _load(database, content_id)).embedding is None


async def test_backfill_embeds_items_missing_a_vector(pipeline, database):
    first, _ = await _create_item(database, title="python one")
    second, _ = await _create_item(database, title="music two")

    report = await EmbeddingProcessor(database, pipeline).process(
        {"job_type": "backfill_embeddings", "batch_size": 1}
    )

    assert report.processed == 2
    assert report.succeeded == 2
    assert report.failed == []
    assert (await _load(database, first)).embedding is not None
    assert (await _load(database, second)).embedding is not None


async def test_backfill_reports_failures_once(pipeline, database, embedding_client):
    content_id, _ = await _create_item(database)
    embedding_client.fail = True

    report = await EmbeddingProcessor(database, pipeline).process(
        {"job_type": "backfill_embeddings"}
    )

    assert report.processed == 1
    assert report.failed == [str(content_id)]
    assert len(embedding_client.calls) == 1


async def test_embed_job_for_single_item(pipeline, database):
    content_id, _ = await _create_item(database)

    result = await EmbeddingProcessor(database, pipeline).process(
        {"job_type": "embed_content", "content_id": str(content_id)}
    )

    assert result.success


async def test_unknown_job_type(pipeline, database):
    with pytest.raises(ValueError, match="Unknown job type"):
        await EmbeddingProcessor(database, pipeline).process({"job_type": "cluster_user"})
