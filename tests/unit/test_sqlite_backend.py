"""Unit tests for the SQLite backend and the run command."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable
from pathlib import Path

import pytest

from sqlrev.backends.base import ExecutionConfig, StatementRunner
from sqlrev.backends.sqlite import SQLiteBackend
from sqlrev.commands.run import run_revision
from sqlrev.core.statements import parse
from sqlrev.domain.errors import ReservedCommandError, StatementExecutionError


def _tables(database: Path) -> list[str]:
    connection = sqlite3.connect(database)
    try:
        rows = connection.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name"
        ).fetchall()
    finally:
        connection.close()
    return [row[0] for row in rows]


class TestSQLiteBackend:
    def test_execute_returns_rowcount(self, memory_connection: sqlite3.Connection) -> None:
        backend = SQLiteBackend(memory_connection)
        assert backend.execute("CREATE TABLE t (id INTEGER)") is None
        assert backend.execute("INSERT INTO t VALUES (1), (2)") == 2

    def test_runner_executes_quoted_semicolons(
        self, memory_connection: sqlite3.Connection
    ) -> None:
        backend = SQLiteBackend(memory_connection)
        group = parse(
            'CREATE TABLE "odd;name" (note TEXT);\n'
            "INSERT INTO \"odd;name\" VALUES ('a;b');\n"
        )
        result = StatementRunner(backend, ExecutionConfig(show_progress=False)).run(group)

        assert result.status == "success"
        assert memory_connection.execute('SELECT note FROM "odd;name"').fetchone() == ("a;b",)

    def test_failed_statement_is_recorded(self, memory_connection: sqlite3.Connection) -> None:
        backend = SQLiteBackend(memory_connection)
        result = StatementRunner(backend, ExecutionConfig(show_progress=False)).run(
            parse("SELECT 1; SELEC broken")
        )
        assert result.status == "partial"
        assert "syntax error" in (result.error_message or "")

    def test_begin_twice_raises(self, memory_connection: sqlite3.Connection) -> None:
        backend = SQLiteBackend(memory_connection)
        backend.begin()
        with pytest.raises(StatementExecutionError):
            backend.begin()
        backend.rollback()

    def test_open_unusable_path_raises(self, temp_workspace: Path) -> None:
        with pytest.raises(StatementExecutionError):
            SQLiteBackend.open(temp_workspace / "missing_dir" / "db.sqlite")


class TestRunRevision:
    def test_successful_revision_is_committed(
        self, temp_workspace: Path, write_revision: Callable[[str, str], Path]
    ) -> None:
        database = temp_workspace / "app.db"
        path = write_revision(
            "0001.sql", "CREATE TABLE a (id INT);\n-- second\nCREATE TABLE b (id INT);\n"
        )
        result = run_revision(path, database, ExecutionConfig(show_progress=False))

        assert result.status == "success"
        assert _tables(database) == ["a", "b"]

    def test_failed_revision_is_rolled_back(
        self, temp_workspace: Path, write_revision: Callable[[str, str], Path]
    ) -> None:
        database = temp_workspace / "app.db"
        path = write_revision(
            "0001.sql", "CREATE TABLE a (id INT);\nINSERT INTO missing VALUES (1);"
        )
        result = run_revision(path, database, ExecutionConfig(show_progress=False))

        assert result.status == "partial"
        assert result.failed_statement_index == 2
        assert _tables(database) == []

    def test_dry_run_changes_nothing(
        self, temp_workspace: Path, write_revision: Callable[[str, str], Path]
    ) -> None:
        database = temp_workspace / "app.db"
        path = write_revision("0001.sql", "CREATE TABLE a (id INT);")
        result = run_revision(path, database, ExecutionConfig(dry_run=True, show_progress=False))

        assert result.statement_results[0].status == "skipped"
        assert _tables(database) == []

    def test_reserved_command_blocks_execution(
        self, temp_workspace: Path, write_revision: Callable[[str, str], Path]
    ) -> None:
        database = temp_workspace / "app.db"
        path = write_revision("0001.sql", "CREATE TABLE a (id INT);\nCOMMIT;")
        with pytest.raises(ReservedCommandError, match="COMMIT"):
            run_revision(path, database, ExecutionConfig(show_progress=False))
        assert not database.exists()
