"""
Schema builder / executor.

A Schema binds an ordered list of table descriptors to one database
connection. Constructing it is the whole operation:

    1. check every column type has a SQL keyword (strict mode)
    2. open the database file, creating it if absent
    3. build one CREATE TABLE IF NOT EXISTS statement per table
    4. run the statements in declaration order, stopping at the first
       failure

Either construction succeeds and every declared table exists, or it
raises a SchemaError subclass, the connection is closed, and the caller
holds no Schema. Tables created before a failing statement stay in
place unless ``atomic=True`` wraps the batch in a transaction.

Usage:

    with schema(
        "app.db",
        table("users",
              column("id", RowId, primary_key(), autoincrement()),
              column("name", str, not_null())),
    ) as db:
        ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from .config import SqullConfig, load_config
from .db import DBConnection, SQLiteBackend
from .errors import StatementError, UnmappedTypeError
from .table import Table
from .type_map import is_mapped

logger = logging.getLogger(__name__)


class Schema:
    """
    Live schema bound to an open database connection.

    Parameters
    ----------
    path:
        Database file path (or ":memory:").
    tables:
        Table descriptors, created in the given order.
    strict_types:
        Reject columns with unmapped value types before touching the
        database. When False the empty type keyword is rendered as-is.
    atomic:
        Run the batch inside a single transaction.

    Raises
    ------
    UnmappedTypeError
        strict_types and a column type has no SQL keyword.
    SchemaConnectionError
        The database file could not be opened or created.
    StatementError
        A CREATE TABLE statement failed; later statements were not run.
    """

    def __init__(
        self,
        path: Union[str, Path],
        *tables: Table,
        strict_types: bool = True,
        atomic: bool = False,
    ):
        for t in tables:
            if not isinstance(t, Table):
                raise TypeError(f"Schema expects Table descriptors, got {t!r}")

        _check_types(tables, strict_types)

        statements = tuple(t.create_statement() for t in tables)
        conn = SQLiteBackend(path).connect()
        try:
            _execute_batch(conn, statements, atomic)
        except Exception:
            conn.close()
            raise

        self._conn = conn
        self._statements = statements
        self._table_names = tuple(t.name for t in tables)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_config(
        cls,
        *tables: Table,
        config: Optional[SqullConfig] = None,
    ) -> "Schema":
        """
        Construct a Schema using a SqullConfig (or the environment).
        """
        cfg = config or load_config()

        if cfg.enable_logging:
            logging.basicConfig(level=logging.INFO)
            logger.info("Building schema with config: %s", cfg)

        return cls(
            cfg.db_path,
            *tables,
            strict_types=cfg.strict_types,
            atomic=cfg.atomic,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def path(self) -> str:
        return self._conn.path

    @property
    def connection(self) -> DBConnection:
        return self._conn

    @property
    def statements(self) -> Tuple[str, ...]:
        """The CREATE TABLE statements issued, in execution order."""
        return self._statements

    @property
    def table_names(self) -> Tuple[str, ...]:
        return self._table_names

    @property
    def closed(self) -> bool:
        return self._conn.closed

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        self._conn.close()

    def __enter__(self) -> "Schema":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self) -> str:
        return f"<Schema {self.path!r} tables={list(self._table_names)!r}>"


def schema(
    path: Union[str, Path],
    *tables: Table,
    strict_types: bool = True,
    atomic: bool = False,
) -> Schema:
    return Schema(path, *tables, strict_types=strict_types, atomic=atomic)


def build_statements(*tables: Table) -> Tuple[str, ...]:
    """Render the DDL batch without opening a database."""
    return tuple(t.create_statement() for t in tables)


# ----------------------------------------------------------------------
# Internal helpers
# ----------------------------------------------------------------------

def _check_types(tables: Sequence[Table], strict: bool) -> None:
    for t in tables:
        for col in t.columns:
            if is_mapped(col.value_type):
                continue
            if strict:
                raise UnmappedTypeError(col.value_type, f"{t.name}.{col.name}")
            logger.warning(
                "Column %s.%s has unmapped type %r; rendering empty SQL type",
                t.name, col.name, col.value_type,
            )


def _execute_batch(conn: DBConnection, statements: Sequence[str], atomic: bool) -> None:
    if atomic:
        conn.begin()

    for sql in statements:
        logger.debug("Executing: %s", sql)
        try:
            conn.execute(sql)
        except StatementError:
            logger.error("Schema statement failed on %s: %s", conn.path, sql)
            if atomic:
                conn.rollback()
            raise

    if atomic:
        conn.commit()


__all__ = [
    "Schema",
    "schema",
    "build_statements",
]
