"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), applying migrations on application start
(``init_db``) and the ``get_ship_store`` dependency used by the ship
routes.  SQLite is used as a lightweight embedded database; to switch to
another DBMS you would replace the connection logic here and the SQL in
``services.ship_store``.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings
from ..services.ship_store import ShipStore

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: ship catalog
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS ship (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            planet TEXT NOT NULL,
            ship_type TEXT NOT NULL,
            prod_date INTEGER NOT NULL,
            is_used INTEGER NOT NULL DEFAULT 0,
            speed REAL NOT NULL,
            crew_size INTEGER NOT NULL,
            rating REAL NOT NULL
        );
        """,
    ),
    # Migration 2: indices for the most common list filters and sort keys
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_ship_prod_date ON ship(prod_date);
        CREATE INDEX IF NOT EXISTS idx_ship_rating ON ship(rating);
        CREATE INDEX IF NOT EXISTS idx_ship_ship_type ON ship(ship_type);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the ``space_fleet_api`` package.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # space_fleet_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.  FastAPI
    opens it in a threadpool worker (``get_ship_store`` is a sync
    dependency) and the async handlers use it on the event loop thread,
    so the thread check is disabled.  A connection is still only ever
    used by one request at a time.
    """
    conn = sqlite3.connect(get_database_path(), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def get_ship_store() -> Iterator[ShipStore]:
    """FastAPI dependency yielding a ship store bound to a fresh connection."""
    conn = get_connection()
    try:
        yield ShipStore(conn)
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  If you add a new migration, append it with an
    incremented version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying database migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
