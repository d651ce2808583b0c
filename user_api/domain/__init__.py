"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  user.py    — the User collection
  mixins.py  — Shared TimestampMixin
"""

from user_api.domain.user import User

__all__ = ["User"]
