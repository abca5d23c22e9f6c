"""
User Entity Model

Represents a registered vault owner.

Model Hierarchy:
================
    User
       ├── content (ContentItem[])   - Saved links
       └── share_links (ShareLink[]) - Public share capabilities (at most one in practice)

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ username         │ "alice"                                                   │
│ password_hash    │ "$2b$05$..."                                              │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from brainvault.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from brainvault.shared.models.content import ContentItem
    from brainvault.shared.models.share_link import ShareLink


class User(Base, TimestampMixin):
    """
    User model.

    Attributes:
        id: Unique identifier (UUID v4)
        username: Login name (unique, indexed, 3-10 characters)
        password_hash: Bcrypt hashed password

    Relationships:
        content: All content items owned by this user
        share_links: Share hashes pointing at this user's vault
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    username: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    content: Mapped[list["ContentItem"]] = relationship(
        "ContentItem",
        back_populates="owner",
        cascade="all, delete-orphan",
    )

    share_links: Mapped[list["ShareLink"]] = relationship(
        "ShareLink",
        back_populates="owner",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
