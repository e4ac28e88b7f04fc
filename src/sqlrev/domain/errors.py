"""Unified domain error taxonomy for revision parsing and execution."""

from dataclasses import dataclass


@dataclass(slots=True)
class SqlrevDomainError(Exception):
    """Base class for application/domain-level failures."""

    message: str
    code: str

    def __str__(self) -> str:
        return self.message


class RevisionParseError(SqlrevDomainError):
    """Raised when a revision script cannot be turned into statements."""


class ReservedCommandError(RevisionParseError):
    """Raised when a statement starts with a transaction-control keyword.

    Revisions are run inside a transaction owned by the runner, so scripts
    may not manage transactions themselves.
    """

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword.upper()
        super().__init__(
            message=f"{self.keyword} command is not supported in a revision",
            code="reserved_command",
        )


class RevisionFileError(SqlrevDomainError):
    """Raised when a revision file cannot be located or read."""


class StatementExecutionError(SqlrevDomainError):
    """Raised when a backend fails outside of a single statement."""
