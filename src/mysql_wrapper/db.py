"""
MySQL connection wrapper around PyMySQL. One connection per Database instance (no pool);
the connection is opened in the constructor and released by disconnect() or by leaving
a `with` block.
"""
import logging
from collections.abc import Sequence

import pymysql

from . import config
from .errors import DatabaseConnectionError, NotConnectedError, QueryError

logger = logging.getLogger(__name__)

CONNECTION_ERROR_PREFIX = "Database connection error: "
QUERY_ERROR_PREFIX = "Query Execution Error: "


def _positional_args(params):
    """Tuple of bound values, or None when there are none."""
    if params is None:
        return None
    if isinstance(params, (str, bytes, bytearray)) or not isinstance(params, Sequence):
        raise TypeError(f"params must be a list or tuple of values, not {type(params).__name__}")
    return tuple(params) if params else None


class Database:
    """Connects on construction and forwards statements to the server with bound parameters."""

    def __init__(self, host, db_name, username, password, port=3306):
        self.host = host
        self.db_name = db_name
        self.username = username
        self.password = password
        self.port = port
        self._connection = None
        self._error_message = None
        self._connect()

    @classmethod
    def from_config(cls, settings=None):
        """Build from a mapping shaped like config.MYSQL (host, port, user, password, database)."""
        settings = settings if settings is not None else config.MYSQL
        return cls(
            host=settings["host"],
            db_name=settings["database"],
            username=settings["user"],
            password=settings["password"],
            port=int(settings.get("port", 3306)),
        )

    def _connect(self):
        try:
            self._connection = pymysql.connect(
                host=self.host,
                port=self.port,
                user=self.username,
                password=self.password,
                database=self.db_name,
                **config.CONNECT_OPTIONS,
            )
        except pymysql.MySQLError as e:
            self._error_message = CONNECTION_ERROR_PREFIX + str(e)
            raise DatabaseConnectionError(self._error_message) from e
        logger.debug("connected to %s:%s/%s as %s", self.host, self.port, self.db_name, self.username)

    def _ensure_connected(self):
        if not self.is_connected():
            raise NotConnectedError()

    def query(self, sql, params=()):
        """Execute sql with params bound by the driver; return the open cursor (caller closes it).

        params is a positional sequence matched to %s placeholders. With no params the
        SQL goes to the server untouched, so a literal '%' needs no escaping.
        """
        self._ensure_connected()
        args = _positional_args(params)
        cur = self._connection.cursor()
        # PyMySQL raises TypeError/ValueError when placeholders and params don't line up
        try:
            cur.execute(sql, args)
        except (pymysql.MySQLError, TypeError, ValueError) as e:
            cur.close()
            self._error_message = QUERY_ERROR_PREFIX + str(e)
            raise QueryError(self._error_message) from e
        return cur

    def select(self, sql, params=()):
        """Execute SELECT and return list of dicts (rows), in server order."""
        cur = self.query(sql, params)
        try:
            return list(cur.fetchall())
        finally:
            cur.close()

    def select_one(self, sql, params=()):
        """Execute SELECT and return first row (dict) or None."""
        rows = self.select(sql, params)
        return rows[0] if rows else None

    def execute(self, sql, params=()):
        """Execute INSERT/UPDATE/DELETE; returns the affected row count."""
        cur = self.query(sql, params)
        try:
            rowcount = cur.rowcount
        finally:
            cur.close()
        # PyMySQL reports -1 when the statement produced no count
        if rowcount is None or rowcount < 0:
            return 0
        return rowcount

    def last_insert_id(self):
        """Id generated by the last INSERT on this connection, as a string; None when disconnected."""
        if not self.is_connected():
            return None
        return str(self._connection.insert_id())

    def is_connected(self):
        return self._connection is not None

    def get_error_message(self):
        """Message of the most recent connection or query failure, or None."""
        return self._error_message

    def disconnect(self):
        """Close the connection. Safe to call more than once."""
        if self._connection is None:
            return
        conn, self._connection = self._connection, None
        try:
            conn.close()
        except pymysql.err.Error:
            # Already closed by the server; the handle is dropped either way
            pass
        logger.debug("disconnected from %s:%s/%s", self.host, self.port, self.db_name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.disconnect()
        return False

    def __repr__(self):
        state = "connected" if self.is_connected() else "disconnected"
        return f"<Database {self.username}@{self.host}:{self.port}/{self.db_name} ({state})>"
