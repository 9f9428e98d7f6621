"""
SQLite backend for squll.

Opens a database file with create-if-missing, read-write semantics
(the ``mode=rwc`` URI flag) and hands back a DBConnection in autocommit
mode. ``:memory:`` opens a private in-memory database.

sqlite3 defers reading the file header until the first statement, so
connect() runs a cheap probe query to make a corrupt or non-database
file fail at open time rather than halfway through a schema batch.
It then takes and releases a write lock, because SQLite silently
opens a write-protected file read-only.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Union

from ..errors import SchemaConnectionError
from .connection import DBConnection

logger = logging.getLogger(__name__)

MEMORY = ":memory:"


class SQLiteBackend:
    """
    Parameters
    ----------
    db_path : str or Path
        Path to the SQLite database file, or ":memory:".
    """

    def __init__(self, db_path: Union[str, Path]):
        self.path = str(db_path)

    def _uri(self) -> str:
        return f"{Path(self.path).absolute().as_uri()}?mode=rwc"

    def connect(self) -> DBConnection:
        """
        Open the database and wrap it.

        Raises
        ------
        SchemaConnectionError
            Invalid path, unreadable or write-protected file, or not a
            SQLite database.
        """
        if not self.path:
            raise SchemaConnectionError(self.path, "empty database path")
        if "\x00" in self.path:
            raise SchemaConnectionError(self.path, "embedded null character")

        try:
            if self.path == MEMORY:
                raw = sqlite3.connect(MEMORY, isolation_level=None)
            else:
                raw = sqlite3.connect(self._uri(), uri=True, isolation_level=None)
        except sqlite3.Error as e:
            raise SchemaConnectionError(self.path, str(e)) from e

        raw.row_factory = sqlite3.Row

        try:
            raw.execute("SELECT count(*) FROM sqlite_master").fetchone()
            # write lock; fails if the file was opened read-only
            raw.execute("BEGIN IMMEDIATE")
            raw.execute("ROLLBACK")
        except sqlite3.Error as e:
            raw.close()
            raise SchemaConnectionError(self.path, str(e)) from e

        logger.info("Opened database %s", self.path)
        return DBConnection(raw, self.path)


__all__ = [
    "SQLiteBackend",
    "MEMORY",
]
