"""
Tag Entity Model

A unique label that content items can reference. The API never creates
tags, so every item's tag list is empty in practice.
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from brainvault.shared.models.base import Base


class Tag(Base):
    """Tag model: ``title`` is unique across the whole vault."""

    __tablename__ = "tags"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Tag(title={self.title!r})>"
