"""
Errors raised by Database. Each carries the message also mirrored by
Database.get_error_message().
"""


class DatabaseError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class DatabaseConnectionError(DatabaseError):
    """The driver could not open a session (bad credentials, unreachable host, unknown database)."""


class QueryError(DatabaseError):
    """Prepare, bind or execute failed on the server."""


class NotConnectedError(DatabaseError):
    """A query was attempted on a disconnected Database."""

    def __init__(self, message="No connection to the database."):
        super().__init__(message)
