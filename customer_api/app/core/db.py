"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager (``get_cursor``) and
``init_db`` which applies migrations on application start.  Applied
migration versions are stored in the ``migrations`` table and new
migrations are executed in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: customers table
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS customers (
            id TEXT PRIMARY KEY,
            version INTEGER NOT NULL DEFAULT 0,
            created_date TEXT NOT NULL,
            last_modified_date TEXT NOT NULL,
            customer_name TEXT NOT NULL,
            table_number TEXT NOT NULL
        );
        """,
    ),
    # Migration 2: name searches go through LIKE
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_customers_customer_name ON customers(customer_name);
        """,
    ),
]


# Directory holding ``pyproject.toml`` and ``run.py``.
PROJECT_ROOT = Path(__file__).resolve().parents[3]

# Largest value SQLite stores in an INTEGER column or accepts as a bound
# parameter (LIMIT/OFFSET included).
SQLITE_MAX_INTEGER = 2**63 - 1


def get_database_path() -> str:
    """Return the SQLite file named by ``settings.database_url``.

    Absolute paths are used as they are, relative ones are taken from
    ``PROJECT_ROOT`` so the file does not depend on the working
    directory the server was started from.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    return str((PROJECT_ROOT / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Open a connection whose rows can be read by column name."""
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor on a fresh connection.

    Everything executed through the cursor is one transaction: it is
    committed when the block exits normally and rolled back when it
    raises.  The connection is closed either way.
    """
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def _schema_version(cursor: sqlite3.Cursor) -> int:
    row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
    return row["version"] or 0


def init_db() -> int:
    """Create the database file if needed and apply pending migrations.

    Entries of ``MIGRATIONS`` newer than the recorded schema version run
    in order, each followed by a row in ``migrations``.  Returns the
    schema version after the call.
    """
    logger = logging.getLogger(__name__)
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        current_version = _schema_version(cursor)
        for version, sql in MIGRATIONS:
            if version <= current_version:
                continue
            cursor.executescript(sql)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            logger.info("Applied migration %s to %s", version, get_database_path())
            current_version = version
    return current_version
