"""
Adapters Package

External service integrations.

Contents:
=========
- embedding_client: Hosted embedding model (OpenAI-compatible API)
- vector_db: Qdrant vector database client

Note: Database access is handled by shared/db/session.py using async SQLAlchemy.

Usage:
======
    from brainvault.shared.adapters.embedding_client import EmbeddingClient
    from brainvault.shared.adapters.vector_db import VectorDBAdapter
"""

from brainvault.shared.adapters.embedding_client import EmbeddingClient
from brainvault.shared.adapters.vector_db import VectorDBAdapter, VectorSearchResult

__all__ = [
    "EmbeddingClient",
    "VectorDBAdapter",
    "VectorSearchResult",
]
