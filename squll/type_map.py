"""
Python type → SQLite type keyword mapping.

The mapping is a process-wide registry keyed by the exact Python type.
Lookups never fail: a type with no entry maps to the empty string, and
callers decide whether that is an error (see Schema(strict_types=...)).

Unsigned integers have no range distinction in SQLite, so the Unsigned
marker maps to the same keyword as int.
"""

from __future__ import annotations

from typing import Dict

from .errors import UnmappedTypeError


# ----------------------------------------------------------------------
# Marker types
# ----------------------------------------------------------------------

class Unsigned(int):
    """Marker for unsigned integer fields. Renders as INT."""


class RowId(int):
    """
    Marker for a SQLite rowid alias. Renders as INTEGER.

    SQLite only accepts AUTOINCREMENT on a column declared exactly
    ``INTEGER PRIMARY KEY``; INT is not enough.
    """


# ----------------------------------------------------------------------
# Registry
# ----------------------------------------------------------------------

_TYPE_MAP: Dict[type, str] = {
    int: "INT",
    Unsigned: "INT",
    bool: "INT",
    RowId: "INTEGER",
    str: "TEXT",
    float: "REAL",
    bytes: "BLOB",
}

# Names accepted in declaration files.
TYPE_NAMES: Dict[str, type] = {
    "int": int,
    "integer": int,
    "unsigned": Unsigned,
    "rowid": RowId,
    "bool": bool,
    "text": str,
    "str": str,
    "real": float,
    "float": float,
    "blob": bytes,
    "bytes": bytes,
}


def map_type(value_type: type) -> str:
    """
    Return the SQL type keyword for a Python type, or "" if unmapped.

    The lookup is exact; subclasses of a mapped type are not mapped
    unless registered themselves.
    """
    return _TYPE_MAP.get(value_type, "")


def is_mapped(value_type: type) -> bool:
    return value_type in _TYPE_MAP


def register_type(value_type: type, keyword: str) -> None:
    """
    Register (or override) the SQL keyword for a Python type.

    Meant to be called once at startup, before any Schema is built.
    """
    if not isinstance(value_type, type):
        raise TypeError(f"Expected a type, got {value_type!r}")
    keyword = keyword.strip()
    if not keyword:
        raise ValueError("SQL type keyword must be non-empty")
    _TYPE_MAP[value_type] = keyword


def resolve_type_name(name: str) -> type:
    """Resolve a declaration-file type name (case-insensitive)."""
    try:
        return TYPE_NAMES[name.strip().lower()]
    except KeyError:
        raise UnmappedTypeError(name) from None


__all__ = [
    "Unsigned",
    "RowId",
    "TYPE_NAMES",
    "map_type",
    "is_mapped",
    "register_type",
    "resolve_type_name",
]
