"""
Thin MySQL connection wrapper: connect once, run parameterized statements, get dict rows back.
"""
from .db import Database
from .errors import DatabaseConnectionError, DatabaseError, NotConnectedError, QueryError

__all__ = [
    "Database",
    "DatabaseError",
    "DatabaseConnectionError",
    "NotConnectedError",
    "QueryError",
]
