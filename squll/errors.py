"""
Exception hierarchy for squll.

Every failure surfaced by the package derives from SqullError, so callers
can catch a single type:

    SqullError
      ├── SchemaError              schema construction failed
      │     ├── SchemaConnectionError
      │     ├── StatementError
      │     └── UnmappedTypeError
      └── DeclarationError         declaration file could not be loaded
"""

from __future__ import annotations

from typing import Optional


class SqullError(RuntimeError):
    """Base class for all squll errors."""


class SchemaError(SqullError):
    """Schema construction failed."""


class SchemaConnectionError(SchemaError):
    """
    The database file could not be opened or created.

    Raised for invalid paths, missing parent directories, permission
    problems and files that are not SQLite databases.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Cannot open database {path!r}: {message}")


class StatementError(SchemaError):
    """
    A generated DDL statement failed to prepare or execute.

    Attributes
    ----------
    statement:
        The SQL text that failed.
    message:
        Diagnostic text reported by the engine.
    """

    def __init__(self, statement: str, message: str):
        self.statement = statement
        self.message = message
        super().__init__(f"DDL failed: {message} | Statement: {statement!r}")


class UnmappedTypeError(SchemaError, TypeError):
    """A column value type has no SQL type keyword."""

    def __init__(self, value_type: object, column: Optional[str] = None):
        self.value_type = value_type
        self.column = column
        type_name = getattr(value_type, "__name__", repr(value_type))
        where = f" for column {column!r}" if column else ""
        super().__init__(f"No SQL type mapped for {type_name}{where}")


class DeclarationError(SqullError):
    """A schema declaration file is missing, malformed or invalid."""


__all__ = [
    "SqullError",
    "SchemaError",
    "SchemaConnectionError",
    "StatementError",
    "UnmappedTypeError",
    "DeclarationError",
]
