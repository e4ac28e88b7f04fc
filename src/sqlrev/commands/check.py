"""
Check Command

Parses revision files and reports which ones would be rejected.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from sqlrev.core.storage import find_revision_files, load_revision
from sqlrev.domain.errors import SqlrevDomainError

console = Console()


@dataclass(slots=True)
class RevisionCheck:
    """Outcome of parsing one revision file."""

    path: Path
    statement_count: int = 0
    error_code: str | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_code is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "ok": self.ok,
            "statementCount": self.statement_count,
            "errorCode": self.error_code,
            "errorMessage": self.error_message,
        }


def collect_revision_paths(paths: list[Path]) -> list[Path]:
    """Expand directories into their revision files, keeping argument order."""
    collected: list[Path] = []
    for path in paths:
        if path.is_dir():
            collected.extend(find_revision_files(path))
        else:
            collected.append(path)
    return collected


def check_revisions(paths: list[Path], encoding: str = "utf-8") -> list[RevisionCheck]:
    """Parse every revision, recording failures instead of stopping at the first."""
    checks: list[RevisionCheck] = []
    for path in collect_revision_paths(paths):
        try:
            group = load_revision(path, encoding=encoding)
        except SqlrevDomainError as e:
            checks.append(RevisionCheck(path=path, error_code=e.code, error_message=e.message))
            continue
        checks.append(RevisionCheck(path=path, statement_count=len(group)))
    return checks


def print_check_report(checks: list[RevisionCheck]) -> None:
    if not checks:
        console.print("[yellow]No revision files found[/yellow]")
        return

    for check in checks:
        name = escape(str(check.path))
        if check.ok:
            console.print(f"  [green]✓[/green] {name} ({check.statement_count} statements)")
        else:
            console.print(f"  [red]✗[/red] {name}: {escape(check.error_message or '')}")

    failed = sum(1 for check in checks if not check.ok)
    if failed:
        console.print(f"\n[red]✗ {failed} of {len(checks)} revisions rejected[/red]")
    else:
        console.print(f"\n[green]✓ All {len(checks)} revisions are valid[/green]")
