"""
Generic Repository

Uniform create/read/update/delete contract shared by every resource table.
Identifiers are validated before the session is touched, so a malformed id
never reaches the database.
"""

import logging
from typing import Any, Generic, Iterable, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFound
from app.database import Base
from app.models import parse_object_id

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """
    Data access for one table.

    Writes are committed immediately unless ``commit=False`` is passed, which
    lets a service group several writes into one transaction.
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _commit(self, commit: bool) -> None:
        if commit:
            await self.session.commit()
        else:
            await self.session.flush()

    async def create(self, doc: dict[str, Any], commit: bool = True) -> ModelT:
        instance = self.model(**doc)
        self.session.add(instance)
        await self._commit(commit)
        logger.debug(f"Inserted {self.model.__tablename__} {instance.id}")
        return instance

    async def get_by_id(self, id: str) -> Optional[ModelT]:
        object_id = parse_object_id(id)
        return await self.session.get(self.model, object_id)

    async def list(self, **filters: Any) -> Sequence[ModelT]:
        query = select(self.model).filter_by(**filters).order_by(self.model.id)
        result = await self.session.execute(query)
        return result.scalars().all()

    async def update(self, id: str, values: dict[str, Any], commit: bool = True) -> int:
        """
        Apply a partial update.

        Returns:
            Number of modified documents (0 when the values were already set)

        Raises:
            BadRequest: Malformed id
            NotFound: No document with this id
        """
        instance = await self.get_by_id(id)
        if instance is None:
            raise NotFound()

        modified = False
        for key, value in values.items():
            if getattr(instance, key) != value:
                setattr(instance, key, value)
                modified = True

        await self._commit(commit)
        return int(modified)

    async def delete_by_id(self, id: str, commit: bool = True) -> int:
        """
        Raises:
            BadRequest: Malformed id
            NotFound: No document with this id
        """
        object_id = parse_object_id(id)
        result = await self.session.execute(
            delete(self.model).where(self.model.id == object_id)
        )
        if result.rowcount == 0:
            await self.session.rollback()
            raise NotFound()
        await self._commit(commit)
        return result.rowcount

    async def delete_many(self, ids: Iterable[str], commit: bool = True) -> int:
        object_ids = [parse_object_id(id) for id in ids]
        if not object_ids:
            return 0
        result = await self.session.execute(
            delete(self.model).where(self.model.id.in_(object_ids))
        )
        await self._commit(commit)
        return result.rowcount

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(self.model.id)))
        return result.scalar() or 0
