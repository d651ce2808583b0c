"""Pytest configuration and fixtures."""

import itertools
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

import user_api.domain  # noqa: F401
from user_api.core.config import Settings
from user_api.core.filters import UserFilterParams
from user_api.db.base import Base
from user_api.domain.user import User
from user_api.main import create_app

MakeUser = Callable[..., Awaitable[User]]

_sequence = itertools.count(1)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite file per test."""
    return Settings(
        app_env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'users_test.db'}",
    )


@pytest.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """Application with its tables created on the test database."""
    application = create_app(settings)
    async with application.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield application
    await application.state.engine.dispose()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(app: FastAPI) -> AsyncGenerator[AsyncSession, None]:
    async with app.state.session_factory() as session:
        yield session


@pytest.fixture
def base_time() -> datetime:
    return datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_user(db_session: AsyncSession, base_time: datetime) -> MakeUser:
    """Factory inserting a committed user; each call is one minute older than the last."""

    async def _make(**overrides: Any) -> User:
        n = next(_sequence)
        values: dict[str, Any] = {
            "name": f"User {n}",
            "email": f"user{n}@example.com",
            "phone": f"+1555000{n:04d}",
            "created_at": base_time - timedelta(minutes=n),
        }
        values.update(overrides)
        values.setdefault("updated_at", values["created_at"])
        user = User(**values)
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user

    return _make


_FILTER_FIELDS = (
    "from_date", "to_date", "created_ago", "status",
    "search", "search_key", "blocked", "email_verified",
)


@pytest.fixture
def make_filters() -> Callable[..., UserFilterParams]:
    """Build UserFilterParams outside a request: `make_filters(status="dead")`."""

    def _make(**values: str | None) -> UserFilterParams:
        unknown = set(values) - set(_FILTER_FIELDS)
        if unknown:
            raise TypeError(f"Unknown filter parameters: {', '.join(sorted(unknown))}")
        params = UserFilterParams.__new__(UserFilterParams)
        for name in _FILTER_FIELDS:
            setattr(params, name, values.get(name) or None)
        return params

    return _make
