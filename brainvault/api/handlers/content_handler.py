"""
Content Handler

Handles saving, listing and deleting the caller's content.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Saving is two steps: the item is committed and the response is sent, then
the EmbeddingPipeline runs as a background task with its own session. The
client never observes embedding failures; the pipeline logs them.
"""

from fastapi import APIRouter, BackgroundTasks, Depends

from brainvault.shared.schemas.common import MessageResponse
from brainvault.shared.schemas.content import (
    ContentItemResponse,
    ContentListResponse,
    CreateContentRequest,
    CreateContentResponse,
    DeleteContentRequest,
    build_content_response,
)
from brainvault.shared.services.content_service import ContentService
from brainvault.worker.pipelines.embedding_pipeline import EmbeddingPipeline
from brainvault.api.dependencies import CurrentUser, DbSession
from brainvault.api.dependencies.services import get_content_service, get_embedding_pipeline


router = APIRouter()


@router.post("", response_model=CreateContentResponse)
async def create_content(
    request: CreateContentRequest,
    current_user: CurrentUser,
    db: DbSession,
    background_tasks: BackgroundTasks,
    content_service: ContentService = Depends(get_content_service),
    pipeline: EmbeddingPipeline = Depends(get_embedding_pipeline),
):
    """
    Save a link for the authenticated user.

    The item starts with no tags and no embedding.
    """
    item = await content_service.create_content(
        owner_id=current_user,
        link=request.link,
        content_type=request.type,
        title=request.title,
    )

    # The pipeline reads the row from its own session
    await db.commit()
    background_tasks.add_task(pipeline.process, item.id)

    return CreateContentResponse(message="Content added", content_id=str(item.id))


@router.get("", response_model=ContentListResponse)
async def list_content(
    current_user: CurrentUser,
    content_service: ContentService = Depends(get_content_service),
):
    """
    List the caller's items, newest first, each with its owner resolved.
    """
    items = await content_service.list_content(current_user)
    return ContentListResponse(
        content=[ContentItemResponse(**build_content_response(item)) for item in items]
    )


@router.delete("", response_model=MessageResponse)
async def delete_content(
    request: DeleteContentRequest,
    current_user: CurrentUser,
    db: DbSession,
    content_service: ContentService = Depends(get_content_service),
):
    """
    Delete one of the caller's items.

    Unknown or foreign ids are ignored; the answer is the same.
    """
    await content_service.delete_content(current_user, request.content_id)
    await db.commit()
    return MessageResponse(message="Content deleted")
