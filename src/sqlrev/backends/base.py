"""
Statement execution

Models and runner for executing a parsed revision one statement at a time.
Backends only need to know how to execute a single SQL string; timing,
fail-fast behavior and progress output live in the runner.
"""

import time
from typing import Literal, Protocol
from uuid import uuid4

from pydantic import BaseModel, Field
from rich.console import Console

from sqlrev.core.statements import StatementGroup
from sqlrev.domain.errors import StatementExecutionError

console = Console()


class ExecutionConfig(BaseModel):
    """Configuration for running a revision

    Attributes:
        dry_run: If True, record every statement as skipped without executing
        stop_on_error: If True, stop at the first failed statement
        show_progress: If True, print per-statement progress
        encoding: Encoding used to read revision files
    """

    dry_run: bool = Field(default=False, description="Preview without executing")
    stop_on_error: bool = Field(default=True, description="Stop at first failure")
    show_progress: bool = Field(default=True, description="Print per-statement progress")
    encoding: str = Field(default="utf-8", description="Revision file encoding")


class StatementResult(BaseModel):
    """Result of a single statement execution"""

    index: int = Field(..., description="1-based position in the revision")
    sql: str = Field(..., description="SQL statement")
    status: Literal["success", "failed", "skipped"] = Field(..., description="Execution status")
    execution_time_ms: int = Field(default=0, description="Execution time in milliseconds")
    error_message: str | None = Field(None, description="Error message if failed")
    rows_affected: int | None = Field(None, description="Rows affected")


class ExecutionResult(BaseModel):
    """Result of running every statement of a revision"""

    run_id: str = Field(..., description="Run ID")
    total_statements: int = Field(..., description="Total statements")
    successful_statements: int = Field(default=0, description="Successful statements")
    failed_statement_index: int | None = Field(
        None, description="1-based position of the first failed statement"
    )
    statement_results: list[StatementResult] = Field(
        default_factory=list, description="Statement results"
    )
    total_execution_time_ms: int = Field(default=0, description="Total execution time (ms)")
    status: Literal["success", "failed", "partial"] = Field(..., description="Overall status")
    error_message: str | None = Field(None, description="Error summary")


class StatementBackend(Protocol):
    """Anything that can execute one SQL statement."""

    def execute(self, sql: str) -> int | None:
        """Execute ``sql`` and return the affected row count, if known."""
        ...


class StatementRunner:
    """Run statements of a revision sequentially against a backend

    Statement failures are recorded in the result rather than raised.
    Only StatementExecutionError from the backend aborts the run.
    """

    def __init__(self, backend: StatementBackend, config: ExecutionConfig | None = None) -> None:
        self.backend = backend
        self.config = config or ExecutionConfig()

    def run(self, group: StatementGroup) -> ExecutionResult:
        run_id = f"run_{uuid4().hex[:8]}"
        total = len(group)
        results: list[StatementResult] = []
        failed_index: int | None = None
        error_message: str | None = None
        start_time = time.perf_counter()

        if not self.config.dry_run:
            self._print(f"\n[bold cyan]Executing {total} statements...[/bold cyan]\n")

        for i, statement in enumerate(group, 1):
            if self.config.dry_run:
                results.append(StatementResult(index=i, sql=statement.text, status="skipped"))
                continue

            self._print(f"[cyan]Statement {i}/{total}[/cyan]")
            result = self._execute_single_statement(statement.text, i)
            results.append(result)

            if result.status == "success":
                elapsed = result.execution_time_ms / 1000
                self._print(f"  [green]✓[/green] Completed in {elapsed:.2f}s")
                continue

            self._print(f"  [red]✗[/red] Failed: {result.error_message}")
            if failed_index is None:
                failed_index = i
                error_message = f"Statement {i} failed: {result.error_message}"
            if self.config.stop_on_error:
                break

        successful = sum(1 for r in results if r.status == "success")
        if failed_index is None:
            status = "success"
        else:
            status = "failed" if successful == 0 else "partial"

        return ExecutionResult(
            run_id=run_id,
            total_statements=total,
            successful_statements=successful,
            failed_statement_index=failed_index,
            statement_results=results,
            total_execution_time_ms=int((time.perf_counter() - start_time) * 1000),
            status=status,
            error_message=error_message,
        )

    def _execute_single_statement(self, sql: str, index: int) -> StatementResult:
        exec_start = time.perf_counter()
        try:
            rows = self.backend.execute(sql)
        except StatementExecutionError:
            raise
        except Exception as e:
            return StatementResult(
                index=index,
                sql=sql,
                status="failed",
                execution_time_ms=int((time.perf_counter() - exec_start) * 1000),
                error_message=str(e),
            )
        return StatementResult(
            index=index,
            sql=sql,
            status="success",
            execution_time_ms=int((time.perf_counter() - exec_start) * 1000),
            rows_affected=rows,
        )

    def _print(self, message: str) -> None:
        if self.config.show_progress:
            console.print(message)
