"""Query-string filter parameters shared by the paginated user endpoints."""


from typing import Optional

from fastapi import Query


class UserFilterParams:
    """FastAPI dependency for the user filter query string.

    Values are kept as raw strings; an empty string counts as absent.
    Interpretation happens in `user_api.repositories.user_filters`.
    """

    def __init__(
        self,
        from_date: Optional[str] = Query(default=None, alias="fromDate", description="YYYY-MM-DD"),
        to_date: Optional[str] = Query(default=None, alias="toDate", description="YYYY-MM-DD"),
        created_ago: Optional[str] = Query(
            default=None, alias="createdAgo", description="Created within the last N days"
        ),
        status: Optional[str] = Query(default=None, description="'dead' also matches deceased, lifeless, no more"),
        search: Optional[str] = Query(default=None, description="Case-insensitive substring"),
        search_key: Optional[str] = Query(default=None, alias="searchKey", description="Field to search (default email)"),
        blocked: Optional[str] = Query(default=None, description="'1' for blocked users"),
        email_verified: Optional[str] = Query(default=None, alias="emailVerified", description="'1' for verified"),
    ):
        self.from_date = from_date or None
        self.to_date = to_date or None
        self.created_ago = created_ago or None
        self.status = status or None
        self.search = search or None
        self.search_key = search_key or None
        self.blocked = blocked or None
        self.email_verified = email_verified or None
