"""
Base Model Classes

Declarative base and the timestamp mixin shared by all BrainVault models.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← Automatic created_at/updated_at

Usage:
======
    from brainvault.shared.models.base import Base, TimestampMixin

    class User(Base, TimestampMixin):
        __tablename__ = "users"
        id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware current time, used as the client-side column default."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Column types are kept portable (generic ``Uuid``, ``JSON``) so the same
    metadata runs on PostgreSQL in deployments and SQLite in tests.
    """


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    - created_at: Set when the record is first inserted
    - updated_at: Updated whenever the record is modified

    Both carry a client-side default with microsecond precision, so
    "newest first" ordering stays stable for rows written in the same second;
    the server default covers rows inserted outside the ORM (migrations, SQL).
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
        index=True,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=utcnow,
        nullable=False,
    )
