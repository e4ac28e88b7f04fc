"""
Click-based CLI for sqlrev.
"""

import sys
import time
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .backends.base import ExecutionConfig
from .commands import (
    check_revisions,
    print_check_report,
    print_execution_summary,
    print_statements,
    run_revision,
    split_revision,
)
from .domain.envelopes import (
    Command,
    check_envelope,
    failure_envelope,
    run_envelope,
    split_envelope,
)
from .domain.errors import SqlrevDomainError

console = Console()


def _fail(command: Command, error: Exception, started: float, json_output: bool) -> None:
    """Report a failed command and exit with status 1."""
    if json_output:
        print(failure_envelope(command, error, started).to_json())
    else:
        console.print(f"[red]✗ Error:[/red] {escape(str(error))}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="sqlrev")
def cli() -> None:
    """sqlrev: split and run SQL revision scripts"""


@cli.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--encoding", default="utf-8", show_default=True, help="Revision file encoding")
@click.option("--json", "json_output", is_flag=True, help="Output a JSON envelope")
def split(path: Path, encoding: str, json_output: bool) -> None:
    """Show the statements of a revision file"""

    started = time.perf_counter()
    try:
        group = split_revision(path, encoding=encoding)
    except SqlrevDomainError as e:
        _fail("split", e, started, json_output)
        return

    if json_output:
        print(split_envelope(str(path), group.texts(), started).to_json())
    else:
        print_statements(group)


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--encoding", default="utf-8", show_default=True, help="Revision file encoding")
@click.option("--json", "json_output", is_flag=True, help="Output a JSON envelope")
def check(paths: tuple[Path, ...], encoding: str, json_output: bool) -> None:
    """Check that revision files can be split and contain no transaction commands"""

    started = time.perf_counter()
    try:
        checks = check_revisions(list(paths), encoding=encoding)
    except SqlrevDomainError as e:
        _fail("check", e, started, json_output)
        return

    if json_output:
        envelope = check_envelope([c.to_dict() for c in checks], started)
        print(envelope.to_json())
        exit_code = envelope.exit_code
    else:
        print_check_report(checks)
        exit_code = 0 if all(c.ok for c in checks) else 1

    if exit_code:
        sys.exit(exit_code)


@cli.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--database",
    "-d",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="SQLite database file",
)
@click.option("--dry-run", is_flag=True, help="Parse and report without executing")
@click.option(
    "--continue-on-error",
    is_flag=True,
    help="Keep executing after a failed statement (changes are still rolled back)",
)
@click.option("--encoding", default="utf-8", show_default=True, help="Revision file encoding")
@click.option("--json", "json_output", is_flag=True, help="Output a JSON envelope")
def run(
    path: Path,
    database: Path,
    dry_run: bool,
    continue_on_error: bool,
    encoding: str,
    json_output: bool,
) -> None:
    """Execute a revision file against a SQLite database"""

    started = time.perf_counter()
    config = ExecutionConfig(
        dry_run=dry_run,
        stop_on_error=not continue_on_error,
        show_progress=not json_output,
        encoding=encoding,
    )
    try:
        result = run_revision(path, database, config)
    except SqlrevDomainError as e:
        _fail("run", e, started, json_output)
        return

    if json_output:
        print(run_envelope(result.model_dump(), started).to_json())
    else:
        print_execution_summary(result, dry_run=dry_run)

    if result.status != "success":
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
