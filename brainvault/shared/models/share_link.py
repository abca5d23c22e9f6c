"""
ShareLink Entity Model

Maps a random hash to the user whose vault it exposes. Holding the hash is
the only thing needed to read that user's full content list and username.

Uniqueness per user is not enforced by the schema; the share service reuses
the first link it finds for a user instead of creating another.
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from brainvault.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from brainvault.shared.models.user import User


class ShareLink(Base, TimestampMixin):
    """
    ShareLink model.

    Attributes:
        id: Unique identifier (UUID v4)
        hash: Public share capability
        user_id: Owner of the shared vault
    """

    __tablename__ = "share_links"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    hash: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    owner: Mapped["User"] = relationship(
        "User",
        back_populates="share_links",
    )

    def __repr__(self) -> str:
        return f"<ShareLink(user_id={self.user_id}, hash={self.hash})>"
