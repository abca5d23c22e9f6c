"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
external services, and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ Adapters (embedding provider, vector index)

Available Services:
===================
- AuthService: Signup, signin, token issuing
- ContentService: Saving, listing and deleting links
- EmbeddingService: Embedding text, storing vectors
- SearchService: Vector similarity search over the caller's items
- ShareService: Share-link toggling and the public vault view
"""

from brainvault.shared.services.auth_service import AuthService
from brainvault.shared.services.content_service import ContentService
from brainvault.shared.services.embedding_service import EmbeddingService, build_content_prompt
from brainvault.shared.services.search_service import SearchService, SearchHit, rank_hits
from brainvault.shared.services.share_service import ShareService

__all__ = [
    "AuthService",
    "ContentService",
    "EmbeddingService",
    "build_content_prompt",
    "SearchService",
    "SearchHit",
    "rank_hits",
    "ShareService",
]
