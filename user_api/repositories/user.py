"""User repository — the four read strategies plus create.

  find_all                  every user, no filtering or paging
  find_page                 filtered SELECT with OFFSET/LIMIT and a second COUNT query
  aggregate_page            one statement computing the page and the total together
  aggregate_projected_page  fixed column projection paged by `aggregate_paginate`
"""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy import ColumnElement, func, select, true

from user_api.core.pagination import PageResult
from user_api.domain.user import User
from user_api.repositories.base import BaseRepository
from user_api.repositories.pagination import aggregate_paginate
from user_api.repositories.user_filters import SortSpec

USER_COLUMNS = tuple(c.name for c in User.__table__.columns)

PROJECTED_COLUMNS = (
    "id",
    "name",
    "email",
    "phone",
    "gender",
    "is_blocked",
    "is_email_verified",
    "created_at",
    "updated_at",
)


class UserRepository(BaseRepository[User]):
    model = User

    async def find_all(self) -> list[User] | None:
        return await self.all()

    async def find_page(
        self,
        predicates: Sequence[ColumnElement[bool]],
        sort: SortSpec,
        *,
        page: int,
        limit: int,
    ) -> PageResult:
        items = await self.list(
            predicates=predicates,
            order_by=sort.order_by(User.__table__.c),
            offset=(page - 1) * limit,
            limit=limit,
        )
        total = await self.count(predicates)
        return PageResult(items=items, total_count=total, limit=limit, page=page)

    async def aggregate_page(
        self,
        predicates: Sequence[ColumnElement[bool]],
        sort: SortSpec,
        *,
        page: int,
        limit: int,
    ) -> PageResult:
        """Page and total in a single round trip.

        Stages: matched -> numbered (row_number over the sort) -> totals,
        page_rows -> totals LEFT JOIN page_rows. The join always yields the
        totals row, so an out-of-range page still reports the total.
        """
        offset = (page - 1) * limit

        matched = select(User.__table__).where(*predicates).cte("matched")
        numbered = select(
            matched,
            func.row_number().over(order_by=sort.order_by(matched.c)).label("position"),
        ).subquery("numbered")
        totals = (
            select(func.count().label("total_count")).select_from(matched).subquery("totals")
        )
        page_rows = (
            select(numbered)
            .where(numbered.c.position > offset, numbered.c.position <= offset + limit)
            .subquery("page_rows")
        )

        stmt = (
            select(totals.c.total_count, *(page_rows.c[name] for name in USER_COLUMNS))
            .select_from(totals.outerjoin(page_rows, true()))
            .order_by(page_rows.c.position)
        )
        rows = (await self._session.execute(stmt)).mappings().all()

        total = rows[0]["total_count"] if rows else 0
        items: list[dict[str, Any]] = [
            {name: row[name] for name in USER_COLUMNS}
            for row in rows
            if row["id"] is not None
        ]
        return PageResult(items=items, total_count=total, limit=limit, page=page)

    async def aggregate_projected_page(
        self,
        predicates: Sequence[ColumnElement[bool]],
        sort: SortSpec,
        *,
        page: int,
        limit: int,
    ) -> PageResult:
        columns = User.__table__.c
        stmt = select(*(columns[name] for name in PROJECTED_COLUMNS)).where(*predicates)
        return await aggregate_paginate(self._session, stmt, page=page, limit=limit, sort=sort)
