"""
Load a .sql schema file through a Database, one statement at a time.
"""
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def split_statements(sql):
    """Split a SQL script on ';' after dropping full-line '--' comments."""
    # a ';' inside a comment line would otherwise end a statement early
    kept = "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))
    return [stmt.strip() for stmt in kept.split(";") if stmt.strip()]


def load_schema(database, path):
    """Run every statement of the file at path; returns how many were executed."""
    schema_path = Path(path)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_path}")
    statements = split_statements(schema_path.read_text(encoding="utf-8"))
    for stmt in statements:
        database.execute(stmt)
    logger.info("loaded %d statements from %s", len(statements), schema_path)
    return len(statements)
