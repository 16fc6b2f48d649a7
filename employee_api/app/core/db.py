"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a transactional cursor (``get_cursor``) and for
applying migrations on application start (``init_db``).  Every
function takes the database path explicitly so that services can be
wired against any store, including temporary files in tests.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from .config import resolve_project_path

logger = logging.getLogger(__name__)

# Range of an SQLite INTEGER column; sqlite3 refuses to bind ints outside it.
SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: employees of the directory variant
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS employees (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            department TEXT NOT NULL
        );
        """,
    ),
    # Migration 2: employees of the skills variant and their owned skills
    (
        2,
        """
        CREATE TABLE IF NOT EXISTS skills (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            skills TEXT
        );

        CREATE TABLE IF NOT EXISTS skilled_employees (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            skills_id INTEGER UNIQUE,
            FOREIGN KEY(skills_id) REFERENCES skills(id)
        );
        """,
    ),
]


def fits_integer_column(value: int) -> bool:
    """Return whether ``value`` can be bound to an INTEGER parameter."""
    return SQLITE_MIN_INTEGER <= value <= SQLITE_MAX_INTEGER


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are returned unchanged.  Relative paths are resolved
    against the project root (the directory holding ``employee_api``).
    """
    return resolve_project_path(database_url)


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name, and foreign key constraints are enabled for the lifetime of
    the connection (SQLite disables them by default).
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(db_path: str) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor inside a single transaction.

    The transaction is committed when the block exits normally and
    rolled back if it raises, so every statement issued through the
    cursor succeeds or fails together.
    """
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    except BaseException:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(db_path: str) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any migrations from
    ``MIGRATIONS`` with a higher version.  To change the schema,
    append a new migration with an incremented version number.
    """
    with get_cursor(db_path) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied migration %s to %s", version, db_path)
                current_version = version
