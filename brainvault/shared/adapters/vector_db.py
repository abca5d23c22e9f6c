"""
Vector database adapter - Qdrant client.

Provides:
- Vector storage keyed by content id
- Similarity search restricted to one user's points
- Vector deletion

Every point carries ``{"content_id", "user_id", "type"}`` as payload; searches
always filter on ``user_id`` so a query can only ever match the caller's items.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from qdrant_client import AsyncQdrantClient
from qdrant_client.http import models as qdrant_models
from qdrant_client.http.exceptions import UnexpectedResponse

from brainvault.config.settings import settings
from brainvault.shared.core.logging import get_logger

logger = get_logger("vector_db")


@dataclass
class VectorSearchResult:
    """Result of a vector similarity search."""

    id: str
    score: float
    payload: Dict[str, Any]


class VectorDBAdapter:
    """
    Adapter for Qdrant vector database operations.

    The collection uses cosine distance and is created on first use.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        api_key: Optional[str] = None,
        collection_name: Optional[str] = None,
        vector_size: Optional[int] = None,
        client: Optional[AsyncQdrantClient] = None,
    ):
        """
        Initialize Qdrant adapter.

        Args:
            url: Qdrant server URL. If not provided, uses settings.
            api_key: Qdrant API key for cloud. If not provided, uses settings.
            collection_name: Collection holding content vectors
            vector_size: Embedding dimensions
            client: Pre-built client (tests pass an in-memory one)
        """
        self.url = url or settings.QDRANT_URL
        self.api_key = api_key or settings.QDRANT_API_KEY or None
        self.collection_name = collection_name or settings.QDRANT_COLLECTION
        self.vector_size = vector_size or settings.EMBEDDING_DIMENSIONS
        self._client = client
        self._collection_ready = False

    @property
    def client(self) -> AsyncQdrantClient:
        """Lazy-loaded Qdrant client."""
        if self._client is None:
            if self.api_key:
                self._client = AsyncQdrantClient(url=self.url, api_key=self.api_key)
            else:
                self._client = AsyncQdrantClient(url=self.url)
        return self._client

    async def ensure_collection(self) -> None:
        """Create the collection if it doesn't exist yet."""
        if self._collection_ready:
            return

        try:
            if not await self.client.collection_exists(self.collection_name):
                await self.client.create_collection(
                    collection_name=self.collection_name,
                    vectors_config=qdrant_models.VectorParams(
                        size=self.vector_size,
                        distance=qdrant_models.Distance.COSINE,
                    ),
                )
                logger.info("Created collection", collection=self.collection_name)
        except UnexpectedResponse as e:
            logger.error("Failed to ensure collection", collection=self.collection_name, error=str(e))
            raise

        self._collection_ready = True

    async def upsert(
        self,
        point_id: str,
        vector: List[float],
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Insert or update a vector.

        Args:
            point_id: Content id
            vector: Embedding vector
            payload: Metadata stored with the vector (must include ``user_id``)
        """
        await self.ensure_collection()
        try:
            await self.client.upsert(
                collection_name=self.collection_name,
                points=[
                    qdrant_models.PointStruct(
                        id=point_id,
                        vector=vector,
                        payload=payload or {},
                    )
                ],
            )
        except UnexpectedResponse as e:
            logger.error("Failed to upsert vector", point_id=point_id, error=str(e))
            raise

    async def search(
        self,
        vector: List[float],
        user_id: str,
        limit: int = 50,
        num_candidates: int = 200,
    ) -> List[VectorSearchResult]:
        """
        Search one user's vectors.

        Args:
            vector: Query vector
            user_id: Only points whose payload ``user_id`` matches are considered
            limit: Maximum number of results
            num_candidates: Size of the HNSW candidate pool explored per query

        Returns:
            List of VectorSearchResult ordered by similarity
        """
        await self.ensure_collection()
        query_filter = qdrant_models.Filter(
            must=[
                qdrant_models.FieldCondition(
                    key="user_id",
                    match=qdrant_models.MatchValue(value=user_id),
                )
            ]
        )

        try:
            results = await self.client.query_points(
                collection_name=self.collection_name,
                query=vector,
                query_filter=query_filter,
                search_params=qdrant_models.SearchParams(hnsw_ef=num_candidates),
                limit=limit,
                with_payload=True,
            )
        except UnexpectedResponse as e:
            logger.error("Vector search failed", user_id=user_id, error=str(e))
            raise

        return [
            VectorSearchResult(
                id=str(r.id),
                score=r.score,
                payload=r.payload or {},
            )
            for r in results.points
        ]

    async def delete(self, ids: List[str]) -> None:
        """Delete vectors by content ids."""
        if not ids:
            return

        await self.ensure_collection()
        try:
            await self.client.delete(
                collection_name=self.collection_name,
                points_selector=qdrant_models.PointIdsList(points=ids),
            )
        except UnexpectedResponse as e:
            logger.error("Failed to delete vectors", ids=ids, error=str(e))
            raise

    async def close(self) -> None:
        """Close the client connection."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            self._collection_ready = False
