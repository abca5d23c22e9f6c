"""
Content-related Pydantic schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from brainvault.shared.models.enums import ContentType


class CreateContentRequest(BaseModel):
    """Request to save a new link."""

    link: str = Field(min_length=1, description="URL to save")
    type: ContentType = Field(description="audio, article, twitter or youtube")
    title: str = Field(min_length=1, description="Title shown in the vault")


class CreateContentResponse(BaseModel):
    """Response after saving content. The embedding is computed afterwards."""

    message: str
    content_id: str


class DeleteContentRequest(BaseModel):
    """Request to delete one of the caller's items."""

    content_id: str = Field(description="Id of the item to delete")


class ContentOwnerResponse(BaseModel):
    """Owner reference resolved on every listed item."""

    id: str
    username: str


class ContentItemResponse(BaseModel):
    """One saved item."""

    id: str
    link: str
    type: ContentType
    title: str
    tags: List[str] = Field(default_factory=list)
    embedding: Optional[List[float]] = None
    created_at: datetime
    user: ContentOwnerResponse


class ContentListResponse(BaseModel):
    """The caller's items, newest first."""

    content: List[ContentItemResponse]


class SearchResultItem(ContentItemResponse):
    """A search hit: the item plus its similarity score."""

    score: float


class SearchResponse(BaseModel):
    """Ranked search hits, best first."""

    results: List[SearchResultItem]


def build_content_response(item, **extra) -> dict:
    """
    Field mapping shared by the list, search and public share views.

    Expects ``item.owner`` and ``item.tags`` to be loaded already.
    """
    return {
        "id": str(item.id),
        "link": item.link,
        "type": item.type,
        "title": item.title,
        "tags": [tag.title for tag in item.tags],
        "embedding": item.embedding,
        "created_at": item.created_at,
        "user": ContentOwnerResponse(id=str(item.owner.id), username=item.owner.username),
        **extra,
    }
