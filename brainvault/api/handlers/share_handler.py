"""
Share Handler

Toggles the caller's public share link and serves the public vault view.
"""

from fastapi import APIRouter, Depends

from brainvault.shared.schemas.common import MessageResponse
from brainvault.shared.schemas.content import ContentItemResponse, build_content_response
from brainvault.shared.schemas.share import ShareHashResponse, SharedVaultResponse, ShareRequest
from brainvault.shared.services.share_service import ShareService
from brainvault.api.dependencies import CurrentUser, DbSession
from brainvault.api.dependencies.services import get_share_service


router = APIRouter()


@router.post("/share", response_model=ShareHashResponse | MessageResponse)
async def toggle_share(
    request: ShareRequest,
    current_user: CurrentUser,
    db: DbSession,
    share_service: ShareService = Depends(get_share_service),
):
    """
    Enable sharing (returns the hash, reused if one exists) or disable it.
    """
    share_hash = await share_service.set_sharing(current_user, request.share)
    await db.commit()
    if share_hash is None:
        return MessageResponse(message="Removed link")
    return ShareHashResponse(hash=share_hash)


@router.get("/{share_link}", response_model=SharedVaultResponse)
async def get_shared_vault(
    share_link: str,
    share_service: ShareService = Depends(get_share_service),
):
    """
    Public, unauthenticated view of a shared vault.

    Raises:
        411: Unknown hash, or the owner no longer exists
    """
    owner, items = await share_service.get_shared_vault(share_link)
    return SharedVaultResponse(
        username=owner.username,
        content=[ContentItemResponse(**build_content_response(item)) for item in items],
    )
