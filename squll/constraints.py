"""
Column constraint tags.

A constraint is an immutable marker whose only behavior is rendering a
fixed SQL clause. Constraints take no parameters; a column carries them
in declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, Iterable

from .fragment import SqlFragment


@dataclass(frozen=True)
class Constraint(SqlFragment):
    """Base class for constraint tags. Subclasses set ``sql``."""

    sql: ClassVar[str] = ""

    def __post_init__(self):
        if not self.sql:
            raise TypeError(f"{type(self).__name__} has no SQL clause; use a concrete constraint")

    def render(self) -> str:
        return self.sql


@dataclass(frozen=True)
class AutoIncrement(Constraint):
    sql: ClassVar[str] = "AUTOINCREMENT"


@dataclass(frozen=True)
class NotNull(Constraint):
    sql: ClassVar[str] = "NOT NULL"


@dataclass(frozen=True)
class PrimaryKey(Constraint):
    sql: ClassVar[str] = "PRIMARY KEY"


@dataclass(frozen=True)
class Unique(Constraint):
    sql: ClassVar[str] = "UNIQUE"


# ----------------------------------------------------------------------
# Factories
# ----------------------------------------------------------------------

def autoincrement() -> AutoIncrement:
    return AutoIncrement()


def not_null() -> NotNull:
    return NotNull()


def primary_key() -> PrimaryKey:
    return PrimaryKey()


def unique() -> Unique:
    return Unique()


# Names accepted in declaration files.
CONSTRAINTS: Dict[str, Callable[[], Constraint]] = {
    "autoincrement": autoincrement,
    "not_null": not_null,
    "primary_key": primary_key,
    "unique": unique,
}


def constraint_by_name(name: str) -> Constraint:
    key = name.strip().lower().replace(" ", "_")
    try:
        return CONSTRAINTS[key]()
    except KeyError:
        raise ValueError(
            f"Unknown constraint {name!r}; expected one of {sorted(CONSTRAINTS)}"
        ) from None


def render_constraints(constraints: Iterable[Constraint]) -> str:
    """Space-join constraint clauses in declaration order."""
    return " ".join(c.render() for c in constraints)


__all__ = [
    "Constraint",
    "AutoIncrement",
    "NotNull",
    "PrimaryKey",
    "Unique",
    "autoincrement",
    "not_null",
    "primary_key",
    "unique",
    "CONSTRAINTS",
    "constraint_by_name",
    "render_constraints",
]
