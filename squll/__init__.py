"""
squll

Declare SQLite tables as descriptors and have their CREATE TABLE
statements generated and executed on open.

Submodules include:
    - type_map      Python type → SQL type keyword
    - constraints   constraint tags (AUTOINCREMENT, NOT NULL, ...)
    - column        column descriptor and field binding
    - table         table descriptor
    - schema        opens the database and runs the DDL batch
    - db/           connection lifecycle and statement execution
    - declarations  JSON declaration files (pydantic)
    - cli/          `squll` console script

The root package re-exports the declaration surface for convenience.
"""

from .column import Column, column, field_column
from .config import SqullConfig, load_config
from .constraints import (
    Constraint,
    autoincrement,
    not_null,
    primary_key,
    unique,
)
from .errors import (
    SqullError,
    SchemaError,
    SchemaConnectionError,
    StatementError,
    UnmappedTypeError,
    DeclarationError,
)
from .schema import Schema, schema, build_statements
from .table import Table, table
from .type_map import RowId, Unsigned, map_type, register_type

__version__ = "0.1.0"

__all__ = [
    # Descriptors
    "Column",
    "column",
    "field_column",
    "Table",
    "table",
    "Schema",
    "schema",
    "build_statements",

    # Constraints
    "Constraint",
    "autoincrement",
    "not_null",
    "primary_key",
    "unique",

    # Types
    "RowId",
    "Unsigned",
    "map_type",
    "register_type",

    # Config
    "SqullConfig",
    "load_config",

    # Errors
    "SqullError",
    "SchemaError",
    "SchemaConnectionError",
    "StatementError",
    "UnmappedTypeError",
    "DeclarationError",
]
