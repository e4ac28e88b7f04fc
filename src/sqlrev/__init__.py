"""
sqlrev

Splits SQL revision scripts into individual statements for per-statement
execution, timing and feedback, and rejects scripts that manage
transactions themselves.
"""

__version__ = "0.1.0"

from .core.scanner import ScanMode, Scanner
from .core.statements import Statement, StatementGroup, parse
from .core.storage import load_revision
from .domain.errors import (
    ReservedCommandError,
    RevisionFileError,
    RevisionParseError,
    SqlrevDomainError,
    StatementExecutionError,
)

__all__ = [
    "__version__",
    "ScanMode",
    "Scanner",
    "Statement",
    "StatementGroup",
    "parse",
    "load_revision",
    "ReservedCommandError",
    "RevisionFileError",
    "RevisionParseError",
    "SqlrevDomainError",
    "StatementExecutionError",
]
