"""User service — query-strategy orchestration and user creation.

Routers call one method per read strategy; each builds the filter predicates
and sort once, then delegates the SQL to UserRepository.
"""

import logging

from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.core.config import Settings
from user_api.core.exceptions import (
    ConflictError,
    NotFoundError,
    ServerError,
    ServiceUnavailableError,
)
from user_api.core.filters import UserFilterParams
from user_api.core.pagination import PageResult, PaginationParams
from user_api.db.base import SQLITE_SORT_KEY
from user_api.domain.user import User
from user_api.repositories.user import UserRepository
from user_api.repositories.user_filters import SortSpec, build_user_filters, resolve_user_sort
from user_api.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, session: AsyncSession, settings: Settings):
        self._repo = UserRepository(session)
        self._settings = settings

    def _prepare(self, pagination: PaginationParams, filters: UserFilterParams):
        pagination.with_default_limit(self._settings.default_page_limit)
        predicates = build_user_filters(filters)
        collation = self._settings.sort_collation
        sort: SortSpec = resolve_user_sort(
            pagination.sort_key,
            pagination.sort,
            collation=collation,
            key_function=SQLITE_SORT_KEY if not collation and self._settings.is_sqlite else None,
        )
        return predicates, sort

    async def list_all(self) -> list[User]:
        users = await self._repo.find_all()
        if users is None:
            raise NotFoundError("No data found")
        return users

    async def find_page(
        self, pagination: PaginationParams, filters: UserFilterParams
    ) -> PageResult:
        predicates, sort = self._prepare(pagination, filters)
        return await self._repo.find_page(
            predicates, sort, page=pagination.page, limit=pagination.limit
        )

    async def aggregate_page(
        self, pagination: PaginationParams, filters: UserFilterParams
    ) -> PageResult:
        predicates, sort = self._prepare(pagination, filters)
        return await self._repo.aggregate_page(
            predicates, sort, page=pagination.page, limit=pagination.limit
        )

    async def aggregate_projected_page(
        self, pagination: PaginationParams, filters: UserFilterParams
    ) -> PageResult:
        predicates, sort = self._prepare(pagination, filters)
        return await self._repo.aggregate_projected_page(
            predicates, sort, page=pagination.page, limit=pagination.limit
        )

    async def create_user(self, data: UserCreate) -> User:
        try:
            user = await self._repo.create(**data.model_dump())
        except IntegrityError as exc:
            logger.info("Rejected user create, integrity error: %s", exc.orig)
            raise ConflictError(f"A user with email '{data.email}' already exists") from exc
        except OperationalError as exc:
            logger.error("Database unreachable while creating user: %s", exc.orig)
            raise ServiceUnavailableError() from exc
        except DBAPIError as exc:
            logger.exception("User create failed")
            raise ServerError() from exc

        logger.info("Created user %s", user.id)
        return user
