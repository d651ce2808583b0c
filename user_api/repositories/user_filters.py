"""Translate user query-string parameters into SQL predicates and ordering.

Filter rules (all optional, AND-ed together):

  fromDate + toDate   created_at in (startOfDay(fromDate), startOfDay(toDate)]
  createdAgo=N        created_at > startOfDay(today - N days); replaces the
                      date range when both are supplied
  status              exact match, "dead" expands to DEAD_STATUSES
  blocked             is_blocked == (blocked == "1")
  emailVerified       is_email_verified == (emailVerified == "1")
  search + searchKey  case-insensitive substring on searchKey (default email)

Days start at midnight UTC.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

from sqlalchemy import ColumnElement, false, func
from sqlalchemy.sql.base import ColumnCollection

from user_api.core.exceptions import ValidationError
from user_api.core.filters import UserFilterParams
from user_api.domain.user import DEAD_STATUSES, User

DEFAULT_SEARCH_KEY = "email"
SEARCHABLE_FIELDS = ("name", "email", "phone", "gender", "status")

DEFAULT_SORT_FIELD = "created_at"
SORTABLE_FIELDS = {"name": "name", "email": "email"}
STRING_SORT_FIELDS = {"name", "email"}

_users = User.__table__.c


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def _parse_day(value: str, param: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{param} must be a date formatted YYYY-MM-DD") from None


def _days_before(today: date, value: str) -> date:
    try:
        return today - timedelta(days=int(value))
    except ValueError:
        raise ValidationError("createdAgo must be a whole number of days") from None
    except OverflowError:
        raise ValidationError("createdAgo is out of range") from None


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_user_filters(
    params: UserFilterParams, today: Optional[date] = None
) -> list[ColumnElement[bool]]:
    """Return the predicates selected by `params`; an empty list matches everything."""
    predicates: list[ColumnElement[bool]] = []

    if params.created_ago is not None:
        today = today or datetime.now(timezone.utc).date()
        since = _days_before(today, params.created_ago)
        predicates.append(_users.created_at > start_of_day(since))
    elif params.from_date and params.to_date:
        start = start_of_day(_parse_day(params.from_date, "fromDate"))
        end = start_of_day(_parse_day(params.to_date, "toDate"))
        predicates.append(_users.created_at > start)
        predicates.append(_users.created_at <= end)

    if params.status:
        if params.status == "dead":
            predicates.append(_users.status.in_(DEAD_STATUSES))
        else:
            predicates.append(_users.status == params.status)

    if params.blocked:
        predicates.append(_users.is_blocked == (params.blocked == "1"))

    if params.email_verified:
        predicates.append(_users.is_email_verified == (params.email_verified == "1"))

    if params.search:
        key = params.search_key or DEFAULT_SEARCH_KEY
        if key in SEARCHABLE_FIELDS:
            pattern = f"%{_escape_like(params.search)}%"
            predicates.append(_users[key].ilike(pattern, escape="\\"))
        else:
            # No such field: nothing can match
            predicates.append(false())

    return predicates


@dataclass(frozen=True)
class SortSpec:
    field: str
    descending: bool
    collation: Optional[str] = None
    # SQL function producing a linguistic sort key, used when no collation is set
    key_function: Optional[str] = None

    def order_by(self, columns: ColumnCollection) -> list[ColumnElement]:
        """ORDER BY clauses against `columns` (a table's or a subquery's `.c`)."""
        keys = [columns[self.field]]
        if self.field in STRING_SORT_FIELDS:
            if self.collation:
                keys = [keys[0].collate(self.collation)]
            elif self.key_function:
                keys.insert(0, getattr(func, self.key_function)(keys[0]))
        keys.append(columns["id"])
        return [key.desc() if self.descending else key.asc() for key in keys]


def resolve_user_sort(
    sort_key: Optional[str],
    sort: int = -1,
    collation: Optional[str] = None,
    key_function: Optional[str] = None,
) -> SortSpec:
    """`name`/`email` sort on that field; anything else sorts on created_at."""
    field = SORTABLE_FIELDS.get(sort_key or "", DEFAULT_SORT_FIELD)
    return SortSpec(
        field=field, descending=sort == -1, collation=collation, key_function=key_function
    )
