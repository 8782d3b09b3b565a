# dnscontroller/infrastructure/repositories/adapters/base.py
"""SQLAlchemy abstract repository with default implementations"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type
from uuid import uuid4

from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dnscontroller.domain.exceptions import EntityNotFound, UniqueConstraintViolation
from dnscontroller.infrastructure.repositories.interfaces.base import AbstractRepository


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell a duplicate key apart from other integrity failures (FK, NOT NULL, CHECK)"""
    # asyncpg reports SQLSTATE 23505, sqlite only has the message
    if getattr(exc.orig, 'sqlstate', None) == '23505':
        return True
    return 'unique' in str(exc.orig).lower()


class SQLAlchemyAbstractRepository(AbstractRepository):
    model: Type = None
    table_name: str = ''

    def __init__(self, session: AsyncSession) -> None:
        self.session: AsyncSession = session

    def _conditions(self, filters: Dict[str, Any]) -> list:
        return [
            getattr(self.model, key) == value
            for key, value in filters.items()
            if hasattr(self.model, key)
        ]

    async def get(self, id: str) -> Optional[Any]:
        if not self.model:
            raise NotImplementedError("Model not specified in repository")

        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def get_by_fields(self, **filters) -> Optional[Any]:
        if not self.model:
            raise NotImplementedError("Model not specified in repository")

        conditions = self._conditions(filters)
        if not conditions:
            return None

        result = await self.session.execute(
            select(self.model).where(and_(*conditions))
        )
        return result.scalar_one_or_none()

    async def one_by_fields(self, **filters) -> Any:
        existing = await self.get_by_fields(**filters)
        if existing is None:
            raise EntityNotFound(f"no {self.table_name} row matching {filters}")
        return existing

    async def find_many(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None
    ) -> List[Any]:
        if not self.model:
            raise NotImplementedError("Model not specified in repository")

        query = select(self.model)

        if filters:
            conditions = self._conditions(filters)
            if conditions:
                query = query.where(and_(*conditions))

        if order_by and hasattr(self.model, order_by):
            query = query.order_by(getattr(self.model, order_by))

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def create(self, entity: Any) -> Any:
        """
        Insert a row inside a savepoint.

        The store assigns the identifier when the row carries none and stamps
        created_at/updated_at. A duplicate natural key only rolls back this
        insert, the surrounding unit of work stays usable.

        Raises:
            UniqueConstraintViolation: If a unique constraint is violated
        """
        now = datetime.now(timezone.utc)
        if not entity.id:
            entity.id = str(uuid4())
        if entity.created_at is None:
            entity.created_at = now
        entity.updated_at = now

        values = entity.to_dict(exclude={'created_at', 'updated_at'})

        try:
            async with self.session.begin_nested():
                self.session.add(entity)
                await self.session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise UniqueConstraintViolation(self.table_name, values) from e
            raise

        return entity

    async def delete(self, id: str) -> None:
        entity = await self.get(id)
        if entity:
            await self.session.delete(entity)
            await self.session.flush()
