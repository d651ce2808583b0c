"""User Pydantic schemas (request DTOs and response models)."""


from datetime import datetime, timezone
from typing import Annotated, Literal

from pydantic import AfterValidator

from user_api.schemas.common import CamelModel

Gender = Literal["male", "female"]
Status = Literal["alive", "dead", "deceased", "lifeless", "no more"]


def _as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; every stored timestamp is UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class UserCreate(CamelModel):
    name: str
    email: str
    phone: str
    gender: Gender | None = None
    is_email_verified: bool = False
    is_blocked: bool = False
    status: Status | None = None

class UserOut(CamelModel):
    id: str
    name: str
    email: str
    phone: str
    gender: str | None = None
    is_email_verified: bool
    is_blocked: bool
    status: str | None = None
    created_at: UtcDatetime
    updated_at: UtcDatetime

class UserSummaryOut(CamelModel):
    """Fixed projection returned by the projected pipeline (no status)."""

    id: str
    name: str
    email: str
    phone: str
    gender: str | None = None
    is_blocked: bool
    is_email_verified: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime
