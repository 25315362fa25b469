"""
SQLite database integration and simple migration system.

The application keeps a single process‑wide SQLite connection which is
opened when the app starts (``open_connection``) and released on
shutdown (``close_connection``).  Services obtain it through
``get_connection`` and wrap multi‑statement writes in ``transaction``
so that both sides of a mentor/student relationship are written
together or not at all.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings

logger = logging.getLogger(__name__)

_connection: Optional[sqlite3.Connection] = None

# Range of SQLite INTEGER; larger Python ints cannot be bound as parameters.
SQLITE_MIN_INTEGER = -(2 ** 63)
SQLITE_MAX_INTEGER = 2 ** 63 - 1


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        -- Mentors keep the ordered list of assigned student ids as JSON text.
        CREATE TABLE IF NOT EXISTS mentors (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT,
            students TEXT NOT NULL DEFAULT '[]',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        -- mentor_id is NULL while the student is unassigned.
        CREATE TABLE IF NOT EXISTS students (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT,
            mentor_id INTEGER,
            previous_mentors TEXT NOT NULL DEFAULT '[]',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(mentor_id) REFERENCES mentors(id)
        );
        """,
    ),

    # Migration 2: index the mentor lookup used by the unassigned and
    # per‑mentor student listings
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_students_mentor_id ON students(mentor_id);
        """,
    ),
]


def is_storable_id(value: int) -> bool:
    """Whether ``value`` fits an SQLite INTEGER column and so could name a row."""
    return SQLITE_MIN_INTEGER <= value <= SQLITE_MAX_INTEGER


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are used as is.  Relative paths are
    resolved against the package root.
    """
    db_url = settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # mentorship_api/
    return str((base_dir / db_url).resolve())


def open_connection() -> sqlite3.Connection:
    """Open the shared connection if it is not open yet and return it.

    The connection runs in autocommit mode; explicit transactions are
    started by ``transaction``.  ``check_same_thread`` is disabled
    because the ASGI server may run startup and request handling on
    different threads.
    """
    global _connection
    if _connection is not None:
        return _connection
    db_path = get_database_path()
    conn = sqlite3.connect(db_path, isolation_level=None, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    # SQLite ignores REFERENCES clauses unless this is enabled per connection.
    conn.execute("PRAGMA foreign_keys = ON")
    _connection = conn
    logger.info("Opened database %s", db_path)
    return conn


def close_connection() -> None:
    """Close the shared connection.  Safe to call when nothing is open."""
    global _connection
    if _connection is None:
        return
    _connection.close()
    _connection = None
    logger.info("Closed database connection")


def get_connection() -> sqlite3.Connection:
    """Return the shared connection opened at startup."""
    if _connection is None:
        raise RuntimeError("Database connection is not open; call open_connection() first")
    return _connection


@contextmanager
def transaction() -> Iterator[sqlite3.Cursor]:
    """Run the enclosed statements in one write transaction.

    ``BEGIN IMMEDIATE`` takes the write lock up front so the reads done
    inside the block cannot go stale before the writes land.  Any
    exception rolls the whole block back and is re‑raised.
    """
    conn = get_connection()
    cursor = conn.cursor()
    cursor.execute("BEGIN IMMEDIATE")
    try:
        yield cursor
    except BaseException:
        conn.rollback()
        raise
    else:
        conn.commit()
    finally:
        cursor.close()


def init_db() -> None:
    """Apply pending migrations to the shared connection.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any migrations from
    ``MIGRATIONS`` with a higher version number.
    """
    conn = get_connection()
    cursor = conn.cursor()
    try:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
                logger.info("Applied migration %s", version)
    finally:
        cursor.close()
