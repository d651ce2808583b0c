"""Pagination helpers for list endpoints."""

import math
from dataclasses import dataclass, field
from typing import Any, Optional

from fastapi import Query


class PaginationParams:
    """FastAPI dependency for `?page=1&limit=10&sort=-1&sortKey=name`."""

    def __init__(
        self,
        page: int = Query(default=1, ge=1, description="Page number (1-based)"),
        limit: Optional[int] = Query(default=None, ge=1, description="Items per page"),
        sort: int = Query(default=-1, description="-1 for descending, anything else ascending"),
        sort_key: Optional[str] = Query(
            default=None, alias="sortKey", description="name | email (default createdAt)"
        ),
    ):
        self.page = page
        self.limit = limit
        self.sort = sort
        self.sort_key = sort_key or None

    def with_default_limit(self, default_limit: int) -> "PaginationParams":
        if self.limit is None:
            self.limit = default_limit
        return self


@dataclass
class PageResult:
    """One page of rows plus the bookkeeping needed to render the envelope."""

    items: list[Any] = field(default_factory=list)
    total_count: int = 0
    limit: int = 10
    page: int = 1

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.limit) if self.limit else 0
