"""
Shared fixtures for squll tests
"""

import sqlite3

import pytest

from squll import (
    RowId,
    autoincrement,
    column,
    not_null,
    primary_key,
    table,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SQULL_* variables from the outer environment out of tests"""
    for name in (
        "SQULL_DB_PATH",
        "SQULL_STRICT_TYPES",
        "SQULL_ATOMIC",
        "SQULL_ENABLE_LOGGING",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test.db"


@pytest.fixture
def users_table():
    return table(
        "users",
        column("id", RowId, primary_key(), autoincrement()),
        column("name", str, not_null()),
    )


@pytest.fixture
def books_table():
    return table(
        "books",
        column("id", RowId, primary_key(), autoincrement()),
        column("title", str, not_null()),
    )


@pytest.fixture
def existing_tables():
    """User tables in a database file, read with a fresh connection"""
    return _existing_tables


def _existing_tables(path):
    conn = sqlite3.connect(str(path))
    try:
        rows = conn.execute(
            "SELECT name FROM sqlite_master "
            "WHERE type = 'table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
        ).fetchall()
    finally:
        conn.close()
    return [r[0] for r in rows]
