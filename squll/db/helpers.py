"""
Statement execution helpers.

Every statement runs on its own cursor, and that cursor is closed on
every exit path, including the error path, before the error propagates.
Engine errors are wrapped in StatementError with the failing SQL attached.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Optional

from ..errors import StatementError


def safe_execute(conn: sqlite3.Connection, query: str, params: Optional[tuple] = None) -> int:
    """
    Execute a single SQL statement and release its cursor.

    Parameters
    ----------
    conn:
        Open sqlite3 connection.
    query:
        One SQL statement. sqlite3 refuses to run more than one per call.
    params:
        Optional parameter tuple.

    Returns
    -------
    int
        The cursor's rowcount (-1 for DDL).

    Raises
    ------
    StatementError
        Wrapped engine error carrying the statement text.
    """
    cur = conn.cursor()
    try:
        cur.execute(query, params or ())
        return cur.rowcount
    except sqlite3.Error as e:
        raise StatementError(query, str(e)) from e
    finally:
        cur.close()


def safe_fetch_all(conn: sqlite3.Connection, query: str, params: Optional[tuple] = None) -> list:
    """Execute a SELECT and return all rows as dicts."""
    cur = conn.cursor()
    try:
        cur.execute(query, params or ())
        return [row_to_dict(r) for r in cur.fetchall()]
    except sqlite3.Error as e:
        raise StatementError(query, str(e)) from e
    finally:
        cur.close()


def row_to_dict(row: Any) -> dict:
    """
    Convert a sqlite3.Row to a plain dict.

    Tuple rows (no row_factory) are keyed by position.
    """
    if row is None:
        return {}

    if hasattr(row, "keys"):
        return {k: row[k] for k in row.keys()}

    return dict(enumerate(row))


__all__ = [
    "safe_execute",
    "safe_fetch_all",
    "row_to_dict",
]
