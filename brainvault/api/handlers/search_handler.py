"""
Search Handler

Semantic search over the caller's vault.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from brainvault.shared.schemas.content import (
    SearchResponse,
    SearchResultItem,
    build_content_response,
)
from brainvault.shared.services.search_service import SearchService
from brainvault.api.dependencies import CurrentUser
from brainvault.api.dependencies.services import get_search_service


router = APIRouter()


@router.get("", response_model=SearchResponse)
async def search(
    current_user: CurrentUser,
    q: Optional[str] = Query(default=None, description="Free-text query"),
    search_service: SearchService = Depends(get_search_service),
):
    """
    Rank the caller's items by similarity to ``q``.

    At most 10 results, best first, each scoring at least 0.75.

    Raises:
        400: Missing or blank query
        500: Embedding or index failure
    """
    hits = await search_service.search(current_user, q)
    return SearchResponse(
        results=[
            SearchResultItem(**build_content_response(hit.item, score=hit.score))
            for hit in hits
        ]
    )
