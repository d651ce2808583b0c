"""Database package — async SQLAlchemy engine, session factory, Base."""
from user_api.db.base import Base, build_engine, build_session_factory, get_db, init_db

__all__ = ["Base", "build_engine", "build_session_factory", "get_db", "init_db"]
