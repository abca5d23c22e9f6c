"""
Base Repository

Shared lookups and inserts for the vault's entity repositories.

Provided Here:
==============
- get(id)       → One row by primary key
- create(**kw)  → Insert, flush, refresh; the row comes back with its id and
                  timestamps filled in

Typed Subclasses:
=================
    class ShareLinkRepository(BaseRepository[ShareLink]):
        ...

    link = await ShareLinkRepository(db).get(link_id)   # ShareLink | None

Transactions:
=============
Nothing here commits. Whoever opened the session commits: ``get_db()`` at
the end of a request, the content handler before it schedules embedding,
and the EmbeddingPipeline for its own session.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from brainvault.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Repository over one mapped model.

    Attributes:
        model: Mapped class (User, ContentItem, ShareLink)
        session: Session of the current unit of work
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """Row with primary key ``record_id``, or None. Relationships stay unloaded."""
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def create(self, **values: Any) -> ModelType:
        """
        Insert a row built from ``values``.

        The flush sends the INSERT inside the current transaction, so unique
        constraint violations surface here as ``IntegrityError``.
        """
        record = self.model(**values)
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record
