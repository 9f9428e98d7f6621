"""
Tests for schema construction against real SQLite files
"""

import logging
import sqlite3

import pytest

from squll import (
    Schema,
    SchemaConnectionError,
    SqullConfig,
    StatementError,
    UnmappedTypeError,
    autoincrement,
    build_statements,
    column,
    not_null,
    schema,
    table,
)
from squll.db import DBConnection


class TestSchemaCreation:
    """Happy-path construction"""

    def test_creates_file_and_tables(self, db_path, users_table, books_table, existing_tables):
        assert not db_path.exists()

        with schema(db_path, users_table, books_table) as sch:
            assert sch.table_names == ("users", "books")
            assert sch.connection.table_names() == ["books", "users"]

        assert db_path.exists()
        assert existing_tables(db_path) == ["books", "users"]

    def test_statements_in_declaration_order(self, db_path, users_table, books_table):
        with schema(db_path, users_table, books_table) as sch:
            assert sch.statements == (
                "CREATE TABLE IF NOT EXISTS users("
                "id INTEGER PRIMARY KEY AUTOINCREMENT,name TEXT NOT NULL);",
                "CREATE TABLE IF NOT EXISTS books("
                "id INTEGER PRIMARY KEY AUTOINCREMENT,title TEXT NOT NULL);",
            )
            assert all("IF NOT EXISTS" in s for s in sch.statements)

    def test_build_statements_matches_executed(self, db_path, users_table, books_table):
        with schema(db_path, users_table, books_table) as sch:
            assert build_statements(users_table, books_table) == sch.statements

    def test_in_memory(self, users_table):
        with schema(":memory:", users_table) as sch:
            assert sch.connection.table_names() == ["users"]

    def test_no_tables(self, db_path, existing_tables):
        with schema(db_path) as sch:
            assert sch.statements == ()
        assert existing_tables(db_path) == []

    def test_rejects_non_table(self, db_path):
        with pytest.raises(TypeError):
            Schema(db_path, column("id", int))


class TestIdempotence:
    """IF NOT EXISTS semantics"""

    def test_second_run_succeeds(self, db_path, users_table, books_table, existing_tables):
        schema(db_path, users_table, books_table).close()
        schema(db_path, users_table, books_table).close()

        assert existing_tables(db_path) == ["books", "users"]

    def test_existing_table_left_untouched(self, db_path, users_table):
        with schema(db_path, users_table) as sch:
            sch.connection.execute("INSERT INTO users (name) VALUES (?)", ("alice",))
            original_sql = sch.connection.table_sql("users")

        changed = table(
            "users",
            column("id", int),
            column("email", str),
        )
        with schema(db_path, changed) as sch:
            assert sch.connection.table_sql("users") == original_sql
            rows = sch.connection.fetch_all("SELECT name FROM users")

        assert rows == [{"name": "alice"}]


class TestStatementFailure:
    """A failing statement stops the batch"""

    def test_zero_column_table(self, db_path, users_table, books_table, existing_tables):
        with pytest.raises(StatementError) as excinfo:
            schema(db_path, users_table, table("nothing"), books_table)

        err = excinfo.value
        assert err.statement == "CREATE TABLE IF NOT EXISTS nothing();"
        assert "syntax error" in err.message
        assert isinstance(err.__cause__, sqlite3.Error)

        # no rollback: earlier tables stay, later ones never run
        assert existing_tables(db_path) == ["users"]

    def test_atomic_batch_rolls_back(self, db_path, users_table, books_table, existing_tables):
        with pytest.raises(StatementError):
            schema(db_path, users_table, table("nothing"), books_table, atomic=True)

        assert existing_tables(db_path) == []

    def test_atomic_batch_commits(self, db_path, users_table, books_table, existing_tables):
        with schema(db_path, users_table, books_table, atomic=True) as sch:
            assert not sch.connection.raw.in_transaction

        assert existing_tables(db_path) == ["books", "users"]

    def test_autoincrement_requires_rowid(self, db_path):
        """SQLite only accepts AUTOINCREMENT on INTEGER PRIMARY KEY"""
        users = table("users", column("id", int, autoincrement()), column("name", str))

        with pytest.raises(StatementError):
            schema(db_path, users)

    def test_connection_closed_on_failure(self, db_path, users_table, monkeypatch):
        closed = []
        original_close = DBConnection.close

        def tracking_close(self):
            closed.append(self.path)
            original_close(self)

        monkeypatch.setattr(DBConnection, "close", tracking_close)

        with pytest.raises(StatementError):
            schema(db_path, users_table, table("nothing"))

        assert closed == [str(db_path)]


class TestUnmappedTypes:
    """Strict and lenient handling of unknown value types"""

    class Payload:
        pass

    def test_strict_fails_before_opening(self, db_path):
        bad = table("blobs", column("id", int), column("data", self.Payload))

        with pytest.raises(UnmappedTypeError) as excinfo:
            schema(db_path, bad)

        assert "blobs.data" in str(excinfo.value)
        assert not db_path.exists()

    def test_lenient_renders_empty_type(self, db_path, caplog, existing_tables):
        bad = table("blobs", column("id", int), column("data", self.Payload, not_null()))

        with caplog.at_level(logging.WARNING, logger="squll.schema"):
            with schema(db_path, bad, strict_types=False) as sch:
                assert sch.statements == (
                    "CREATE TABLE IF NOT EXISTS blobs(id INT,data  NOT NULL);",
                )

        assert existing_tables(db_path) == ["blobs"]
        assert "unmapped type" in caplog.text


class TestConnectionFailure:
    """Opening the database file"""

    def test_missing_directory(self, tmp_path, users_table):
        path = tmp_path / "missing" / "test.db"

        with pytest.raises(SchemaConnectionError) as excinfo:
            schema(path, users_table)

        assert excinfo.value.path == str(path)

    def test_not_a_database(self, db_path, users_table):
        db_path.write_bytes(b"definitely not sqlite " * 64)

        with pytest.raises(SchemaConnectionError):
            schema(db_path, users_table)

    def test_directory_path(self, tmp_path, users_table):
        with pytest.raises(SchemaConnectionError):
            schema(tmp_path, users_table)

    def test_null_byte_path(self, tmp_path, users_table):
        with pytest.raises(SchemaConnectionError):
            schema(str(tmp_path / "a") + "\x00b.db", users_table)

        assert not (tmp_path / "a").exists()


class TestLifecycle:
    """Connection ownership"""

    def test_close_is_idempotent(self, db_path, users_table):
        sch = schema(db_path, users_table)
        assert not sch.closed

        sch.close()
        sch.close()

        assert sch.closed

    def test_closed_connection_rejects_statements(self, db_path, users_table):
        sch = schema(db_path, users_table)
        sch.close()

        with pytest.raises(SchemaConnectionError):
            sch.connection.execute("SELECT 1")

    def test_context_manager_closes(self, db_path, users_table):
        with schema(db_path, users_table) as sch:
            pass
        assert sch.closed

    def test_separate_schemas_own_separate_connections(self, db_path, users_table):
        with schema(db_path, users_table) as a, schema(db_path, users_table) as b:
            assert a.connection is not b.connection
            assert a.connection.raw is not b.connection.raw


class TestFromConfig:
    """Construction driven by SqullConfig"""

    def test_uses_config_values(self, db_path, users_table, existing_tables):
        cfg = SqullConfig(db_path=str(db_path), atomic=True)

        with Schema.from_config(users_table, config=cfg) as sch:
            assert sch.path == str(db_path)

        assert existing_tables(db_path) == ["users"]

    def test_reads_environment(self, db_path, users_table, monkeypatch):
        monkeypatch.setenv("SQULL_DB_PATH", str(db_path))

        with Schema.from_config(users_table) as sch:
            assert sch.path == str(db_path)

    def test_lenient_config(self, db_path):
        bad = table("t", column("data", TestUnmappedTypes.Payload))
        cfg = SqullConfig(db_path=str(db_path), strict_types=False)

        with Schema.from_config(bad, config=cfg) as sch:
            assert sch.statements == ("CREATE TABLE IF NOT EXISTS t(data );",)
