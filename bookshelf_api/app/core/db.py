"""
SQLite database integration.

The service keeps one process‑wide connection which is opened when the
application starts (``connect``) and closed when it stops (``close``).
Request handlers reach it through ``get_connection``.  Handlers run on
the event loop so the connection is never used from two threads at
once; ``check_same_thread`` is disabled only because startup may run in
a different thread than the loop.

Schema management is external.  ``init_schema`` merely creates the
``Books`` table when it is missing so that a fresh database file is
usable; it does not track versions.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

from .config import settings

logger = logging.getLogger(__name__)

_connection: Optional[sqlite3.Connection] = None


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path (or ``:memory:``),
    use it directly.  Otherwise resolve it relative to the package root.
    """
    db_url = settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # bookshelf_api/
    return str((base_dir / db_url).resolve())


def connect() -> sqlite3.Connection:
    """Open the shared connection, replacing any previous one."""
    global _connection
    close()
    db_path = get_database_path()
    conn = sqlite3.connect(db_path, check_same_thread=False)
    # Return rows as dict‑like objects keyed by column name
    conn.row_factory = sqlite3.Row
    _connection = conn
    logger.info("Connected to database %s", db_path)
    return conn


def get_connection() -> sqlite3.Connection:
    """Return the shared connection.

    Raises ``sqlite3.ProgrammingError`` when ``connect`` has not been
    called, the same error the driver raises for a closed connection.
    """
    if _connection is None:
        raise sqlite3.ProgrammingError("Database connection has not been established")
    return _connection


def close() -> None:
    """Close the shared connection if one is open."""
    global _connection
    if _connection is not None:
        _connection.close()
        _connection = None
        logger.info("Database connection closed")


def init_schema() -> None:
    """Create the ``Books`` table if it does not exist."""
    conn = get_connection()
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS Books (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            author TEXT NOT NULL,
            price REAL NOT NULL
        )
        """
    )
    conn.commit()
