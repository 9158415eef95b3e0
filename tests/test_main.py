"""
python -m mysql_wrapper connection check.
"""
import logging
from unittest.mock import MagicMock, patch

import pytest

from mysql_wrapper import DatabaseConnectionError
from mysql_wrapper.__main__ import main


@pytest.mark.unit
def test_main_logs_server_version(caplog):
    database = MagicMock()
    database.__enter__.return_value = database
    database.select_one.return_value = {"version": "8.0.36"}

    with patch("mysql_wrapper.__main__.Database.from_config", return_value=database):
        with caplog.at_level(logging.INFO, logger="mysql_wrapper.__main__"):
            main()

    database.select_one.assert_called_once_with("SELECT VERSION() AS version")
    database.__exit__.assert_called_once()
    assert "server version 8.0.36" in caplog.text


@pytest.mark.unit
def test_main_exits_on_connection_failure(caplog):
    error = DatabaseConnectionError("Database connection error: (1045, 'Access denied')")

    with patch("mysql_wrapper.__main__.Database.from_config", side_effect=error):
        with pytest.raises(SystemExit) as excinfo:
            main()

    assert excinfo.value.code == 1
    assert "Database connection failed: Database connection error:" in caplog.text
