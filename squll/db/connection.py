"""
Connection lifecycle wrapper.

DBConnection owns exactly one raw sqlite3 handle and releases it exactly
once. It exposes only what schema creation needs: single-statement
execution, explicit batch transactions, and introspection of the tables
that exist.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from . import helpers
from ..errors import SchemaConnectionError, StatementError

logger = logging.getLogger(__name__)


class DBConnection:
    """
    Thin owner of a live sqlite3 connection.

    Notes:
        - The raw connection is expected in autocommit mode
          (isolation_level=None); begin()/commit()/rollback() issue the
          transaction statements explicitly.
        - close() is safe to call multiple times; only the first call
          releases the handle.
    """

    def __init__(self, raw_conn: sqlite3.Connection, path: str):
        self._raw: Optional[sqlite3.Connection] = raw_conn
        self.path = path

    @property
    def raw(self) -> sqlite3.Connection:
        if self._raw is None:
            raise SchemaConnectionError(self.path, "connection is closed")
        return self._raw

    @property
    def closed(self) -> bool:
        return self._raw is None

    # ------------------------------------------------------------------
    # SQL execution
    # ------------------------------------------------------------------

    def execute(self, query: str, params: Optional[tuple] = None) -> int:
        """Execute one statement. Raises StatementError on failure."""
        return helpers.safe_execute(self.raw, query, params)

    def fetch_all(self, query: str, params: Optional[tuple] = None) -> list:
        return helpers.safe_fetch_all(self.raw, query, params)

    def table_names(self) -> List[str]:
        """Names of the user tables currently in the database."""
        rows = self.fetch_all(
            """
            SELECT name
            FROM sqlite_master
            WHERE type = 'table' AND name NOT LIKE 'sqlite_%'
            ORDER BY name
            """
        )
        return [r["name"] for r in rows]

    def table_sql(self, name: str) -> Optional[str]:
        """The stored CREATE statement for a table, or None."""
        rows = self.fetch_all(
            "SELECT sql FROM sqlite_master WHERE type = 'table' AND name = ?",
            (name,),
        )
        return rows[0]["sql"] if rows else None

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def begin(self) -> None:
        self.execute("BEGIN")

    def commit(self) -> None:
        self.execute("COMMIT")

    def rollback(self) -> None:
        """
        Roll back the open transaction.

        A rollback failure is logged and not raised, so the original
        statement error is the one the caller sees.
        """
        if not self.raw.in_transaction:
            return
        try:
            self.execute("ROLLBACK")
        except StatementError:
            logger.exception("Rollback failed on %s", self.path)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the handle. Later calls are no-ops."""
        raw, self._raw = self._raw, None
        if raw is None:
            return
        raw.close()
        logger.debug("Closed database %s", self.path)

    def __enter__(self) -> "DBConnection":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<DBConnection {self.path!r} ({state})>"


__all__ = ["DBConnection"]
