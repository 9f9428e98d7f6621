"""
Global configuration settings for squll.

This module centralizes configuration for:

    - default database path
    - unmapped-type policy
    - batch transaction policy
    - feature flags (logging)

It provides:
    SqullConfig   – structured config object
    load_config() – load from environment variables or defaults
"""

from __future__ import annotations

from dataclasses import dataclass
import os


@dataclass
class SqullConfig:
    """
    Canonical configuration for schema construction.

    Attributes
    ----------
    db_path:
        Path to the SQLite database file, or ":memory:".

    strict_types:
        If True, a column whose value type has no SQL keyword aborts
        schema construction with UnmappedTypeError. If False, the empty
        keyword is rendered and a warning is logged.

    atomic:
        If True, the whole CREATE TABLE batch runs in one transaction and
        is rolled back on failure. If False, each statement commits on
        its own and earlier tables survive a later failure.

    enable_logging:
        Whether Schema.from_config should configure basic INFO logging.
    """

    db_path: str = "squll.db"
    strict_types: bool = True
    atomic: bool = False
    enable_logging: bool = False


def load_config() -> SqullConfig:
    """
    Load SqullConfig from environment variables, falling back to defaults.

    Recognized variables:
        SQULL_DB_PATH          (path or ":memory:")
        SQULL_STRICT_TYPES     ("true" / "false" / "1" / "0")
        SQULL_ATOMIC           ("true" / "false" / "1" / "0")
        SQULL_ENABLE_LOGGING   ("true" / "false" / "1" / "0")

    Returns
    -------
    SqullConfig
    """

    def _env_flag(name: str, default: bool) -> bool:
        val = os.getenv(name)
        if val is None:
            return default
        return val.strip().lower() in ("1", "true", "yes", "on")

    return SqullConfig(
        db_path=os.getenv("SQULL_DB_PATH", "squll.db"),
        strict_types=_env_flag("SQULL_STRICT_TYPES", default=True),
        atomic=_env_flag("SQULL_ATOMIC", default=False),
        enable_logging=_env_flag("SQULL_ENABLE_LOGGING", default=False),
    )


__all__ = [
    "SqullConfig",
    "load_config",
]
