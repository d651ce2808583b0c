"""User router — four read strategies over the same filters, plus create.

  GET  /user/1  every user, unpaginated
  GET  /user/2  filtered find + separate count
  GET  /user/3  single-statement pipeline
  GET  /user/4  projected pipeline via the reusable paginator
  POST /user/   create a user
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.core.filters import UserFilterParams
from user_api.core.pagination import PaginationParams
from user_api.core.response import PageResponse, page_envelope
from user_api.db.base import get_db
from user_api.schemas.user import UserCreate, UserOut, UserSummaryOut
from user_api.services.user import UserService

router = APIRouter(prefix="/user", tags=["Users"])


# ------------------------------------------------------------------
# Helper — instantiate service with session + app settings
# ------------------------------------------------------------------

def _svc(request: Request, session: AsyncSession) -> UserService:
    return UserService(session, request.app.state.settings)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("/1", response_model=list[UserOut])
async def list_all_users(
    request: Request,
    session: AsyncSession = Depends(get_db),
):
    """Every user, no filtering, sorting or pagination."""
    users = await _svc(request, session).list_all()
    return [UserOut.model_validate(u) for u in users]


@router.get("/2", response_model=PageResponse[UserOut])
async def find_users(
    request: Request,
    pagination: PaginationParams = Depends(),
    filters: UserFilterParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """Filtered, sorted page using OFFSET/LIMIT and a separate count."""
    result = await _svc(request, session).find_page(pagination, filters)
    return page_envelope(result, UserOut)


@router.get("/3", response_model=PageResponse[UserOut])
async def aggregate_users(
    request: Request,
    pagination: PaginationParams = Depends(),
    filters: UserFilterParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """Same page as /2, computed with its total in one statement."""
    result = await _svc(request, session).aggregate_page(pagination, filters)
    return page_envelope(result, UserOut)


@router.get("/4", response_model=PageResponse[UserSummaryOut])
async def aggregate_projected_users(
    request: Request,
    pagination: PaginationParams = Depends(),
    filters: UserFilterParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """Same page as /3 restricted to the summary fields."""
    result = await _svc(request, session).aggregate_projected_page(pagination, filters)
    return page_envelope(result, UserSummaryOut)


@router.post("/", response_model=UserOut)
async def create_user(
    request: Request,
    body: UserCreate,
    session: AsyncSession = Depends(get_db),
):
    """Create a user from a full record."""
    user = await _svc(request, session).create_user(body)
    return UserOut.model_validate(user)
