"""SQLAlchemy ORM model for Users."""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from user_api.db.base import Base
from user_api.domain.mixins import TimestampMixin

GENDERS = ("male", "female")
STATUSES = ("alive", "dead", "deceased", "lifeless", "no more")

# "dead" in a status filter stands for every one of these
DEAD_STATUSES = ("dead", "deceased", "lifeless", "no more")


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)

    # "male" | "female"
    gender: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    is_email_verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_blocked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    # one of STATUSES
    status: Mapped[Optional[str]] = mapped_column(String(20), nullable=True, index=True)
