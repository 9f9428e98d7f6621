"""
Common contract for every schema descriptor.

Constraints, columns and tables each know how to render their own piece
of SQL and nothing else. Higher levels only ever call render() on the
level below.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class SqlFragment(ABC):
    """A descriptor that renders a partial SQL string."""

    @abstractmethod
    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


__all__ = ["SqlFragment"]
