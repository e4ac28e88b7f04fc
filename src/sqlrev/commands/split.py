"""
Split Command

Shows the statements a revision file will be executed as.
"""

from pathlib import Path

from rich.console import Console
from rich.syntax import Syntax

from sqlrev.core.statements import StatementGroup
from sqlrev.core.storage import load_revision

console = Console()


def split_revision(path: Path, encoding: str = "utf-8") -> StatementGroup:
    """Load a revision file and split it into statements.

    Raises:
        RevisionFileError: If the file cannot be read
        ReservedCommandError: If the script manages transactions itself
    """
    return load_revision(path, encoding=encoding)


def print_statements(group: StatementGroup) -> None:
    """Print each statement numbered and syntax highlighted."""
    if not group:
        console.print("[yellow]No statements found[/yellow]")
        return

    total = len(group)
    for i, statement in enumerate(group, 1):
        console.print(f"[cyan]Statement {i}/{total}[/cyan]")
        console.print(Syntax(statement.text, "sql", theme="monokai", line_numbers=False))
