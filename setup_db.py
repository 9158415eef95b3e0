"""
Create the MySQL database (e.g. test) and load schema. Run once before the integration tests.
Uses the same MYSQL_* settings as the package (.env). Run from project root: python setup_db.py
"""
import sys
from pathlib import Path

import pymysql

from mysql_wrapper import Database, DatabaseError, config
from mysql_wrapper.schema import load_schema


def main():
    db_name = config.MYSQL["database"]
    schema_path = Path(__file__).resolve().parent / "schema.sql"

    # Connect without database to create it
    conn = pymysql.connect(
        host=config.MYSQL["host"],
        port=config.MYSQL["port"],
        user=config.MYSQL["user"],
        password=config.MYSQL["password"],
        charset=config.CONNECT_OPTIONS["charset"],
    )
    try:
        with conn.cursor() as cur:
            cur.execute(f"CREATE DATABASE IF NOT EXISTS `{db_name}` CHARACTER SET utf8mb4")
    finally:
        conn.close()

    with Database.from_config() as database:
        count = load_schema(database, schema_path)
    print(f"Database '{db_name}' created and {count} statements loaded from schema.sql")


if __name__ == "__main__":
    try:
        main()
    except (pymysql.MySQLError, DatabaseError, FileNotFoundError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)
