"""
Table descriptor.

A table is a name plus an ordered, fixed collection of columns. Its
fragment is the comma-joined column fragments; the name is kept apart
so the schema can assemble the full statement.
"""

from __future__ import annotations

from typing import Tuple

from .column import Column
from .fragment import SqlFragment


class Table(SqlFragment):
    """
    Parameters
    ----------
    name:
        Table name.
    columns:
        Columns in declaration order. An empty table is accepted here and
        rejected by the engine when its statement runs.
    """

    def __init__(self, name: str, *columns: Column):
        if not name:
            raise ValueError("Table name must be non-empty")
        for col in columns:
            if not isinstance(col, Column):
                raise TypeError(f"Table {name!r}: not a column: {col!r}")

        self._name = name
        self._columns: Tuple[Column, ...] = tuple(columns)

    @property
    def name(self) -> str:
        return self._name

    @property
    def columns(self) -> Tuple[Column, ...]:
        return self._columns

    def render(self) -> str:
        return ",".join(col.render() for col in self._columns)

    def create_statement(self) -> str:
        return f"CREATE TABLE IF NOT EXISTS {self._name}({self.render()});"

    def __repr__(self) -> str:
        return f"Table({self._name!r}, {list(self._columns)!r})"


def table(name: str, *columns: Column) -> Table:
    return Table(name, *columns)


__all__ = [
    "Table",
    "table",
]
