"""Generic collection handle over one ORM model.

A thin document-store facade: insert one, find by predicate, find by id,
update by id and delete by id. Handlers never build queries for the plain
CRUD cases themselves.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from plant_tracker.db.base import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


def coerce_id(raw: Any) -> uuid.UUID | None:
    """Return the UUID for a path id, or None when it cannot be one."""
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw))
    except (ValueError, TypeError, AttributeError):
        return None


class Collection(Generic[ModelType]):
    """CRUD operations for ``model`` bound to one request's session."""

    def __init__(self, db: AsyncSession, model: type[ModelType]):
        self.db = db
        self.model = model

    @property
    def name(self) -> str:
        return self.model.__tablename__

    async def insert_one(self, values: dict[str, Any]) -> ModelType:
        obj = self.model(**values)
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        logger.debug("Inserted %s %s", self.name, obj.id)
        return obj

    async def find_one(self, **predicate: Any) -> ModelType | None:
        """First document matching all ``predicate`` fields."""
        result = await self.db.execute(select(self.model).filter_by(**predicate).limit(1))
        return result.scalars().first()

    async def find(
        self,
        *,
        order_by: Any = None,
        limit: int | None = None,
        **predicate: Any,
    ) -> list[ModelType]:
        stmt = select(self.model).filter_by(**predicate)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def find_by_id(self, raw_id: Any) -> ModelType | None:
        obj_id = coerce_id(raw_id)
        if obj_id is None:
            return None
        return await self.db.get(self.model, obj_id)

    async def update_by_id(self, raw_id: Any, values: dict[str, Any]) -> ModelType | None:
        obj = await self.find_by_id(raw_id)
        if obj is None:
            return None
        return await self.update(obj, values)

    async def update(self, obj: ModelType, values: dict[str, Any]) -> ModelType:
        for field, value in values.items():
            setattr(obj, field, value)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete_by_id(self, raw_id: Any) -> ModelType | None:
        """Delete and return the removed document (None when absent)."""
        obj = await self.find_by_id(raw_id)
        if obj is None:
            return None
        return await self.delete(obj)

    async def delete(self, obj: ModelType) -> ModelType:
        await self.db.delete(obj)
        await self.db.flush()
        logger.debug("Deleted %s %s", self.name, obj.id)
        return obj
