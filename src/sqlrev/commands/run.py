"""
Run Command

Executes a revision file against a SQLite database inside one transaction.
The transaction is committed only when every statement succeeds.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from sqlrev.backends.base import ExecutionConfig, ExecutionResult, StatementRunner
from sqlrev.backends.sqlite import SQLiteBackend
from sqlrev.core.storage import load_revision

console = Console()


def run_revision(path: Path, database: Path, config: ExecutionConfig) -> ExecutionResult:
    """Parse and execute a revision.

    Args:
        path: Revision file to execute
        database: SQLite database file
        config: Execution configuration

    Returns:
        ExecutionResult with per-statement timing

    Raises:
        RevisionFileError: If the revision cannot be read
        ReservedCommandError: If the revision manages transactions itself
        StatementExecutionError: If the database cannot be used
    """
    group = load_revision(path, encoding=config.encoding)
    backend = SQLiteBackend.open(database)
    try:
        backend.begin()
        result = StatementRunner(backend, config).run(group)
        if result.status == "success" and not config.dry_run:
            backend.commit()
        else:
            backend.rollback()
    finally:
        backend.close()
    return result


def print_execution_summary(result: ExecutionResult, dry_run: bool) -> None:
    if dry_run:
        console.print(
            f"[yellow]Dry run: {result.total_statements} statements parsed, none executed[/yellow]"
        )
        return

    elapsed = result.total_execution_time_ms / 1000
    if result.status == "success":
        console.print(
            f"\n[green]✓ {result.successful_statements}/{result.total_statements} "
            f"statements executed in {elapsed:.2f}s[/green]"
        )
    else:
        console.print(
            f"\n[red]✗ Revision {result.status}:[/red] {escape(result.error_message or '')}"
        )
        console.print("  Changes were rolled back")
