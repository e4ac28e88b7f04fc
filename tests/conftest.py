import sqlite3
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from sqlrev.cli import cli


@pytest.fixture
def temp_workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace directory"""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace


@pytest.fixture
def revisions_dir(temp_workspace: Path) -> Path:
    """Create a revisions directory inside the workspace"""
    revisions = temp_workspace / "revisions"
    revisions.mkdir()
    return revisions


@pytest.fixture
def write_revision(revisions_dir: Path) -> Callable[[str, str], Path]:
    """Write a revision script and return its path"""

    def _write(name: str, content: str) -> Path:
        path = revisions_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def memory_connection() -> Iterator[sqlite3.Connection]:
    """In-memory SQLite connection in autocommit mode"""
    connection = sqlite3.connect(":memory:", isolation_level=None)
    yield connection
    connection.close()


@pytest.fixture
def invoke_cli() -> Callable[..., Result]:
    """Invoke the Click CLI with string arguments"""
    runner = CliRunner()

    def _invoke(*args: str) -> Result:
        return runner.invoke(cli, list(args), catch_exceptions=True)

    return _invoke
