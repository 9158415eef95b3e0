"""
Shared fixtures. Unit tests patch pymysql.connect; integration tests need a live MySQL
configured through MYSQL_* (see .env.example) and are skipped when it is unreachable.
"""
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from mysql_wrapper import Database, DatabaseConnectionError
from mysql_wrapper.schema import load_schema

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schema.sql"


@pytest.fixture
def fake_cursor():
    cursor = MagicMock(name="cursor")
    cursor.rowcount = 0
    cursor.fetchall.return_value = []
    return cursor


@pytest.fixture
def fake_connection(fake_cursor):
    connection = MagicMock(name="connection")
    connection.cursor.return_value = fake_cursor
    connection.insert_id.return_value = 0
    return connection


@pytest.fixture
def mock_connect(fake_connection):
    """Patch pymysql.connect so Database(...) gets fake_connection."""
    with patch("mysql_wrapper.db.pymysql.connect", return_value=fake_connection) as connect:
        yield connect


@pytest.fixture
def database(mock_connect):
    db = Database("db.example", "shop", "app", "s3cret")
    yield db
    db.disconnect()


@pytest.fixture
def live_db():
    """Database against the configured server with an empty users table."""
    try:
        db = Database.from_config()
    except DatabaseConnectionError as e:
        pytest.skip(f"MySQL not available: {e}")
    with db:
        load_schema(db, SCHEMA_PATH)
        db.execute("TRUNCATE TABLE users")
        yield db
