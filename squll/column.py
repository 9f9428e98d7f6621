"""
Column descriptor.

A column binds a name to a Python value type and an ordered sequence of
constraints. The value type is only used to pick the SQL type keyword;
no row data is ever read or written through it.
"""

from __future__ import annotations

import types
import typing
from typing import Any, Optional, Tuple

from .constraints import Constraint, render_constraints
from .fragment import SqlFragment
from .type_map import map_type


class Column(SqlFragment):
    """
    A single column of a table.

    Parameters
    ----------
    name:
        Column name. Must be non-empty; uniqueness within the table is
        the caller's responsibility.
    value_type:
        Python type used for SQL type inference (int, str, Unsigned, ...).
    constraints:
        Constraint tags, rendered in the given order.
    """

    def __init__(self, name: str, value_type: type, *constraints: Constraint):
        if not name:
            raise ValueError("Column name must be non-empty")
        for c in constraints:
            if not isinstance(c, Constraint):
                raise TypeError(f"Column {name!r}: not a constraint: {c!r}")

        self._name = name
        self._value_type = value_type
        self._constraints: Tuple[Constraint, ...] = tuple(constraints)

    @property
    def name(self) -> str:
        return self._name

    @property
    def value_type(self) -> type:
        return self._value_type

    @property
    def constraints(self) -> Tuple[Constraint, ...]:
        return self._constraints

    @property
    def sql_type(self) -> str:
        return map_type(self._value_type)

    def render(self) -> str:
        sql = f"{self._name} {self.sql_type}"
        if self._constraints:
            sql += " " + render_constraints(self._constraints)
        return sql

    def __repr__(self) -> str:
        type_name = getattr(self._value_type, "__name__", repr(self._value_type))
        return f"Column({self._name!r}, {type_name}, {list(self._constraints)!r})"


def column(name: str, value_type: type, *constraints: Constraint) -> Column:
    return Column(name, value_type, *constraints)


# ----------------------------------------------------------------------
# Field binding
# ----------------------------------------------------------------------

def _unwrap_optional(annotation: Any) -> Any:
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def field_column(
    model: type,
    field_name: str,
    *constraints: Constraint,
    name: Optional[str] = None,
) -> Column:
    """
    Build a column from an annotated field of ``model``.

    The field's annotation supplies the value type (``Optional[X]`` is
    unwrapped to ``X``). The column name defaults to the field name.

    Example
    -------
        @dataclass
        class User:
            id: RowId
            name: str

        field_column(User, "id", primary_key(), autoincrement())
    """
    hints = typing.get_type_hints(model)
    if field_name not in hints:
        raise AttributeError(
            f"{model.__name__} has no annotated field {field_name!r}"
        )
    value_type = _unwrap_optional(hints[field_name])
    return Column(name or field_name, value_type, *constraints)


__all__ = [
    "Column",
    "column",
    "field_column",
]
