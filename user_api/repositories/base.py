"""Generic async repository with counting, pagination and create."""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic repository over one mapped model.

    Filters are passed as already-built SQLAlchemy predicates and AND-ed.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self, predicates: Sequence[ColumnElement[bool]] = ()):
        """Return a SELECT of the model restricted by `predicates`."""
        q = select(self.model)
        if predicates:
            q = q.where(*predicates)
        return q

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def all(self) -> list[ModelT]:
        items = (await self._session.execute(self._base_query())).scalars().all()
        return list(items)

    async def count(self, predicates: Sequence[ColumnElement[bool]] = ()) -> int:
        count_q = select(func.count()).select_from(self.model)
        if predicates:
            count_q = count_q.where(*predicates)
        return (await self._session.execute(count_q)).scalar_one()

    async def list(
        self,
        *,
        predicates: Sequence[ColumnElement[bool]] = (),
        order_by: Sequence[ColumnElement] = (),
        offset: int = 0,
        limit: int = 10,
    ) -> list[ModelT]:
        q = self._base_query(predicates)
        if order_by:
            q = q.order_by(*order_by)
        q = q.offset(offset).limit(limit)

        items = (await self._session.execute(q)).scalars().all()
        return list(items)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id, timestamps; raises IntegrityError
        await self._session.refresh(instance)
        return instance
