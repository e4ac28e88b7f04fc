"""
SQLite backend

Executes revision statements through the standard library sqlite3 driver.
The connection runs in autocommit mode so the backend controls the single
transaction wrapping a revision, DDL included.
"""

import sqlite3
from pathlib import Path

from sqlrev.domain.errors import StatementExecutionError


class SQLiteBackend:
    """Statement backend for a SQLite database"""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    @classmethod
    def open(cls, path: Path) -> "SQLiteBackend":
        """Open (or create) the database file at ``path``."""
        try:
            connection = sqlite3.connect(path, isolation_level=None)
        except sqlite3.Error as e:
            raise StatementExecutionError(
                message=f"Could not open SQLite database {path}: {e}", code="backend_unavailable"
            ) from e
        return cls(connection)

    def execute(self, sql: str) -> int | None:
        cursor = self.connection.execute(sql)
        return cursor.rowcount if cursor.rowcount >= 0 else None

    def begin(self) -> None:
        if self.connection.in_transaction:
            raise StatementExecutionError(
                message="A transaction is already open on this connection",
                code="transaction_already_open",
            )
        self.connection.execute("BEGIN")

    def commit(self) -> None:
        self.connection.commit()

    def rollback(self) -> None:
        self.connection.rollback()

    def close(self) -> None:
        self.connection.close()
