"""Service-level tests: error mapping and the defensive not-found path."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError, ProgrammingError

from user_api.core.exceptions import NotFoundError, ServerError, ServiceUnavailableError
from user_api.core.pagination import PageResult, PaginationParams
from user_api.schemas.user import UserCreate
from user_api.services.user import UserService


@pytest.fixture
def service(db_session, settings) -> UserService:
    return UserService(db_session, settings)


def _pagination(**overrides) -> PaginationParams:
    values = {"page": 1, "limit": None, "sort": -1, "sort_key": None}
    values.update(overrides)
    return PaginationParams(**values)


async def test_list_all_raises_not_found_when_store_returns_nothing(service):
    service._repo.find_all = AsyncMock(return_value=None)

    with pytest.raises(NotFoundError) as exc_info:
        await service.list_all()

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "No data found"


async def test_default_limit_comes_from_settings(db_session, settings, make_filters):
    settings.default_page_limit = 3
    service = UserService(db_session, settings)

    result = await service.find_page(_pagination(), make_filters())

    assert result.limit == 3


async def test_find_page_passes_page_and_limit(service, make_user, make_filters):
    for _ in range(5):
        await make_user()

    result = await service.find_page(_pagination(page=2, limit=2), make_filters())

    assert isinstance(result, PageResult)
    assert len(result.items) == 2
    assert result.total_count == 5
    assert result.total_pages == 3


async def test_unreachable_database_is_service_unavailable(service):
    service._repo.create = AsyncMock(
        side_effect=OperationalError("INSERT INTO users", {}, Exception("connection refused"))
    )
    body = UserCreate(name="A", email="a@example.com", phone="1")

    with pytest.raises(ServiceUnavailableError) as exc_info:
        await service.create_user(body)

    assert exc_info.value.status_code == 503


async def test_other_database_errors_are_server_errors(service):
    service._repo.create = AsyncMock(
        side_effect=ProgrammingError("INSERT INTO users", {}, Exception("bad sql"))
    )
    body = UserCreate(name="A", email="a@example.com", phone="1")

    with pytest.raises(ServerError) as exc_info:
        await service.create_user(body)

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Something went wrong"


@pytest.mark.parametrize(
    ("total", "limit", "pages"),
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3)],
)
def test_total_pages(total, limit, pages):
    assert PageResult(total_count=total, limit=limit).total_pages == pages
