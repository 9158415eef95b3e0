"""
Configuration from environment. No hardcoded secrets.
Copy .env.example to .env at project root. Default DB is local MySQL database 'test'.
"""
import os
from pathlib import Path

from dotenv import load_dotenv
from pymysql.cursors import DictCursor

# Load .env from project root (two levels above the package)
load_dotenv(Path(__file__).resolve().parents[2] / ".env")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

MYSQL = {
    "host": os.environ.get("MYSQL_HOST", "localhost"),
    "port": int(os.environ.get("MYSQL_PORT", "3306")),
    "user": os.environ.get("MYSQL_USER", "root"),
    "password": os.environ.get("MYSQL_PASSWORD", ""),
    "database": os.environ.get("MYSQL_DATABASE", "test"),
}

# Fixed options for every connection: 4-byte UTF-8, dict rows, each statement committed as it runs
CONNECT_OPTIONS = {
    "charset": "utf8mb4",
    "cursorclass": DictCursor,
    "autocommit": True,
}
