"""Database utilities - engine and session."""

from src.wtt.core.db.engine import create_tables, dispose_engine, get_engine
from src.wtt.core.db.session import get_session

__all__ = [
    # Engine
    "create_tables",
    "dispose_engine",
    "get_engine",
    # Session
    "get_session",
]
