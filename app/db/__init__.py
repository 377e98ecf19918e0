"""Database package: engine, session, base."""

from app.db.session import create_db_engine, create_session_maker, get_db

__all__ = ["create_db_engine", "create_session_maker", "get_db"]
