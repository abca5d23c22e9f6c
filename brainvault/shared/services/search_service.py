"""
Search Service

Semantic search over one user's vault.

Flow:
=====
    query text
        │  EmbeddingService.embed_text()
        ▼
    query vector
        │  VectorDBAdapter.search(user_id=caller, limit=50, num_candidates=200)
        ▼
    raw hits (caller's points only)
        │  rank_hits(): score >= 0.75, sort descending, keep 10
        ▼
    ranked hits
        │  ContentRepository.get_many_for_owner()  (drops vanished/foreign ids)
        ▼
    [(ContentItem, score), ...]
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from brainvault.config.settings import Settings, settings as default_settings
from brainvault.shared.adapters.vector_db import VectorSearchResult
from brainvault.shared.core.exceptions import InternalError, ValidationError
from brainvault.shared.core.logging import get_logger
from brainvault.shared.models.content import ContentItem
from brainvault.shared.repositories.content_repository import ContentRepository
from brainvault.shared.services.content_service import parse_content_id
from brainvault.shared.services.embedding_service import EmbeddingService

logger = get_logger("search_service")


@dataclass
class SearchHit:
    """A content item matched by a query."""

    item: ContentItem
    score: float


def rank_hits(
    hits: Iterable[VectorSearchResult],
    threshold: float,
    top_k: int,
) -> List[VectorSearchResult]:
    """Keep hits scoring at least ``threshold``, best first, at most ``top_k``."""
    kept = [hit for hit in hits if hit.score >= threshold]
    kept.sort(key=lambda hit: hit.score, reverse=True)
    return kept[:top_k]


class SearchService:
    """
    Service for vector similarity search.

    Attributes:
        session: Database session used to hydrate hits
        embedding_service: Embeds the query and owns the vector index
        settings: Search tuning (candidates, limit, threshold, top-k)
    """

    def __init__(
        self,
        session: AsyncSession,
        embedding_service: EmbeddingService,
        settings: Optional[Settings] = None,
    ) -> None:
        self.session = session
        self.repo = ContentRepository(session)
        self.embedding_service = embedding_service
        self.settings = settings or default_settings

    async def search(self, owner_id: UUID, query: Optional[str]) -> List[SearchHit]:
        """
        Search the caller's items.

        Raises:
            ValidationError: Empty or blank query
            InternalError: Any embedding, index or database failure
        """
        query = (query or "").strip()
        if not query:
            raise ValidationError(
                "Query cannot be empty",
                details={
                    "errors": [
                        {"field": "q", "message": "Query cannot be empty", "type": "value_error"}
                    ]
                },
            )

        try:
            vector = await self.embedding_service.embed_text(query)
            raw_hits = await self.embedding_service.vector_db.search(
                vector=vector,
                user_id=str(owner_id),
                limit=self.settings.SEARCH_LIMIT,
                num_candidates=self.settings.SEARCH_NUM_CANDIDATES,
            )
            ranked = rank_hits(
                raw_hits,
                threshold=self.settings.SEARCH_SCORE_THRESHOLD,
                top_k=self.settings.SEARCH_TOP_K,
            )
            hits = await self._hydrate(ranked, owner_id)
        except Exception as e:
            logger.error(
                "Search failed",
                user_id=str(owner_id),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise InternalError("Search failed") from e

        logger.info(
            "Search completed",
            user_id=str(owner_id),
            candidates=len(raw_hits),
            results=len(hits),
        )
        return hits

    async def _hydrate(
        self,
        ranked: List[VectorSearchResult],
        owner_id: UUID,
    ) -> List[SearchHit]:
        """Load ranked hits from the database, keeping rank order."""
        ids = [parsed for parsed in (parse_content_id(hit.id) for hit in ranked) if parsed]
        items = {item.id: item for item in await self.repo.get_many_for_owner(ids, owner_id)}

        hits = []
        for hit in ranked:
            item = items.get(parse_content_id(hit.id))
            if item is not None:
                hits.append(SearchHit(item=item, score=hit.score))
        return hits
