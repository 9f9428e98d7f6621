"""Command-line tools for squll."""

from .squll_create import main

__all__ = ["main"]
