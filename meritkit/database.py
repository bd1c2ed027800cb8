"""Opening the SQLite database that holds climate and demand data."""

from __future__ import annotations

import os
import sqlite3


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a query fails."""


def open_database(path: str | os.PathLike[str]) -> sqlite3.Connection:
    """Open the SQLite database at ``path`` and return the connection.

    Raises DatabaseError when the file cannot be opened.
    """
    try:
        connection = sqlite3.connect(os.fspath(path))
        # Touch the schema so that an unreadable file fails here, not later.
        connection.execute("SELECT name FROM sqlite_master LIMIT 1").fetchall()
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc
    return connection