"""Reusable skip/limit/count helper for projected SELECT statements."""

from __future__ import annotations

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.core.pagination import PageResult
from user_api.repositories.user_filters import SortSpec


async def aggregate_paginate(
    session: AsyncSession,
    stmt: Select,
    *,
    page: int,
    limit: int,
    sort: SortSpec,
) -> PageResult:
    """Run `stmt` as a source and return one page of its rows as dicts.

    The statement must select every column `sort` refers to plus `id`.
    Ordering and offset/limit are applied on top of it, the total is a
    count over the unpaged source.
    """
    source = stmt.subquery("source")

    total = (
        await session.execute(select(func.count()).select_from(source))
    ).scalar_one()

    page_q = (
        select(source)
        .order_by(*sort.order_by(source.c))
        .offset((page - 1) * limit)
        .limit(limit)
    )
    rows = (await session.execute(page_q)).mappings().all()

    return PageResult(
        items=[dict(row) for row in rows],
        total_count=total,
        limit=limit,
        page=page,
    )
