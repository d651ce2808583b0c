"""Standardized JSON response envelope helpers."""


from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from user_api.core.pagination import PageResult

T = TypeVar("T")


class PageResponse(BaseModel, Generic[T]):
    """Paginated response envelope:
    `{ data: [...], totalCount, totalPages, limit, page }`
    """

    data: list[T]
    total_count: int
    total_pages: int
    limit: int
    page: int

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def page_envelope(result: PageResult, schema: type[BaseModel]) -> dict:
    """Build a page envelope dict for use with PageResponse."""
    return {
        "data": [schema.model_validate(item) for item in result.items],
        "total_count": result.total_count,
        "total_pages": result.total_pages,
        "limit": result.limit,
        "page": result.page,
    }
