"""
Connection check: python -m mysql_wrapper
Opens a Database from the MYSQL_* settings, prints the server version, exits 1 on failure.
"""
import logging
import sys

from . import config
from .db import Database
from .errors import DatabaseError

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(stream=sys.stderr, level=config.LOG_LEVEL)
    try:
        with Database.from_config() as database:
            row = database.select_one("SELECT VERSION() AS version")
    except DatabaseError as e:
        logger.error("Database connection failed: %s", e)
        sys.exit(1)
    logger.info(
        "connected to %s:%s/%s, server version %s",
        config.MYSQL["host"],
        config.MYSQL["port"],
        config.MYSQL["database"],
        row["version"] if row else "unknown",
    )


if __name__ == "__main__":
    main()
