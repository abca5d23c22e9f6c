"""
ContentItem Entity Model

A link saved into a user's vault.

The embedding starts out NULL and is written once by the background
embedding pipeline after the create request has been answered.

SAMPLE CONTENT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 770e8400-e29b-41d4-a716-446655440000                      │
│ link             │ "https://youtube.com/watch?v=abc"                         │
│ type             │ youtube                                                   │
│ title            │ "FastAPI in 10 minutes"                                   │
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000                      │
│ embedding        │ [0.0123, -0.0456, ...] (1536 floats) or NULL              │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import JSON, Column, Enum, ForeignKey, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from brainvault.shared.models.base import Base, TimestampMixin
from brainvault.shared.models.enums import ContentType


if TYPE_CHECKING:
    from brainvault.shared.models.tag import Tag
    from brainvault.shared.models.user import User


content_tags = Table(
    "content_tags",
    Base.metadata,
    Column(
        "content_id",
        Uuid(as_uuid=True),
        ForeignKey("content.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Uuid(as_uuid=True),
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class ContentItem(Base, TimestampMixin):
    """
    ContentItem model.

    Attributes:
        id: Unique identifier (UUID v4)
        link: Saved URL
        type: One of audio, article, twitter, youtube
        title: User supplied title
        user_id: Owning user
        embedding: Semantic vector, NULL until backfilled

    Relationships:
        owner: The user who saved this item
        tags: Tag references (never populated by the API)
    """

    __tablename__ = "content"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    link: Mapped[str] = mapped_column(Text, nullable=False)

    type: Mapped[ContentType] = mapped_column(
        Enum(
            ContentType,
            name="contenttype",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    embedding: Mapped[Optional[list[float]]] = mapped_column(
        JSON(none_as_null=True),
        nullable=True,
        default=None,
    )

    owner: Mapped["User"] = relationship(
        "User",
        back_populates="content",
    )

    tags: Mapped[list["Tag"]] = relationship(
        "Tag",
        secondary=content_tags,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<ContentItem(id={self.id}, type={self.type}, title={self.title!r})>"
