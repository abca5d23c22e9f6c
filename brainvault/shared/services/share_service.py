"""
Share Service

Public, read-only sharing of a user's vault.

A share hash is a capability: anyone holding it can read the owner's
username and full content list. Enabling twice returns the same hash;
disabling deletes it, so the old hash stops resolving.

Usage:
======
    service = ShareService(db)
    share_hash = await service.set_sharing(user_id, True)
    owner, items = await service.get_shared_vault(share_hash)
"""

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from brainvault.config.settings import Settings, settings as default_settings
from brainvault.shared.core.exceptions import InvalidShareLinkError
from brainvault.shared.core.logging import get_logger
from brainvault.shared.models.content import ContentItem
from brainvault.shared.models.user import User
from brainvault.shared.repositories.content_repository import ContentRepository
from brainvault.shared.repositories.share_link_repository import ShareLinkRepository
from brainvault.shared.repositories.user_repository import UserRepository
from brainvault.shared.utils.security import SecurityUtils

logger = get_logger("share_service")


class ShareService:
    """Service for share-link business logic."""

    def __init__(self, session: AsyncSession, settings: Optional[Settings] = None) -> None:
        self.session = session
        self.settings = settings or default_settings
        self.link_repo = ShareLinkRepository(session)
        self.user_repo = UserRepository(session)
        self.content_repo = ContentRepository(session)

    async def set_sharing(self, owner_id: UUID, share: bool) -> Optional[str]:
        """
        Enable or disable sharing for ``owner_id``.

        Returns:
            The active hash when enabling, None when disabling
        """
        if not share:
            removed = await self.link_repo.delete_by_owner(owner_id)
            logger.info("Share link removed", user_id=str(owner_id), removed=removed)
            return None

        existing = await self.link_repo.get_by_owner(owner_id)
        if existing:
            return existing.hash

        share_hash = SecurityUtils.generate_share_hash(self.settings.SHARE_HASH_LENGTH)
        await self.link_repo.create_link(owner_id, share_hash)
        logger.info("Share link created", user_id=str(owner_id))
        return share_hash

    async def get_shared_vault(self, share_hash: str) -> Tuple[User, List[ContentItem]]:
        """
        Resolve a public hash to its owner and their items (newest first).

        Raises:
            InvalidShareLinkError: Unknown hash, or the owner no longer exists
        """
        link = await self.link_repo.get_by_hash(share_hash)
        if not link:
            raise InvalidShareLinkError("Incorrect hash")

        owner = await self.user_repo.get(link.user_id)
        if not owner:
            raise InvalidShareLinkError("User not found")

        items = await self.content_repo.list_by_owner(owner.id)
        return owner, items
