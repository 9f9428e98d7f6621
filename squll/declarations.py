"""
JSON schema declarations.

Lets a schema be described in a file instead of code:

    {
      "db_path": "app.db",
      "tables": [
        {"name": "users",
         "columns": [
           {"name": "id", "type": "rowid",
            "constraints": ["primary_key", "autoincrement"]},
           {"name": "name", "type": "text", "constraints": ["not_null"]}
         ]}
      ]
    }

The file is validated with pydantic and converted into Table/Column
descriptors. Type names come from type_map.TYPE_NAMES and constraint
names from constraints.CONSTRAINTS.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .column import Column
from .constraints import constraint_by_name
from .errors import DeclarationError
from .table import Table
from .type_map import TYPE_NAMES, resolve_type_name


# ============================================================
# Models
# ============================================================

class ColumnDeclaration(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    type: str
    constraints: List[str] = Field(default_factory=list)

    @field_validator("type")
    @classmethod
    def _known_type(cls, v: str) -> str:
        if v.strip().lower() not in TYPE_NAMES:
            raise ValueError(
                f"unknown type {v!r}; expected one of {sorted(TYPE_NAMES)}"
            )
        return v

    @field_validator("constraints")
    @classmethod
    def _known_constraints(cls, v: List[str]) -> List[str]:
        for name in v:
            constraint_by_name(name)
        return v

    def to_column(self) -> Column:
        return Column(
            self.name,
            resolve_type_name(self.type),
            *(constraint_by_name(c) for c in self.constraints),
        )


class TableDeclaration(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    columns: List[ColumnDeclaration] = Field(default_factory=list)

    def to_table(self) -> Table:
        return Table(self.name, *(c.to_column() for c in self.columns))


class SchemaDeclaration(BaseModel):
    model_config = ConfigDict(extra="forbid")

    db_path: Optional[str] = None
    tables: List[TableDeclaration]

    def to_tables(self) -> Tuple[Table, ...]:
        return tuple(t.to_table() for t in self.tables)


# ============================================================
# Loading
# ============================================================

def parse_declaration(data: Dict[str, Any]) -> SchemaDeclaration:
    """Validate an already-decoded declaration mapping."""
    try:
        return SchemaDeclaration.model_validate(data)
    except ValidationError as e:
        raise DeclarationError(f"Invalid schema declaration: {e}") from e


def load_declaration(path: Union[str, Path]) -> SchemaDeclaration:
    """
    Read and validate a JSON declaration file.

    Raises
    ------
    DeclarationError
        The file cannot be read, is not JSON, or fails validation.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DeclarationError(f"Cannot read declaration {str(path)!r}: {e}") from e

    try:
        return SchemaDeclaration.model_validate_json(text)
    except ValidationError as e:
        raise DeclarationError(f"Invalid schema declaration {str(path)!r}: {e}") from e


__all__ = [
    "ColumnDeclaration",
    "TableDeclaration",
    "SchemaDeclaration",
    "parse_declaration",
    "load_declaration",
]
