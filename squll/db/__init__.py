"""
squll.db

Database access layer used by the schema executor.

This package provides:

- SQLiteBackend: opens a database file (create-if-missing, read-write)
- DBConnection:  owns one live handle, executes single statements,
                 releases the handle exactly once
- Helpers for statement execution with guaranteed cursor release:
      * safe_execute
      * safe_fetch_all
      * row_to_dict
"""

from .connection import DBConnection
from .sqlite_backend import SQLiteBackend, MEMORY
from .helpers import safe_execute, safe_fetch_all, row_to_dict

__all__ = [
    "DBConnection",
    "SQLiteBackend",
    "MEMORY",
    "safe_execute",
    "safe_fetch_all",
    "row_to_dict",
]
