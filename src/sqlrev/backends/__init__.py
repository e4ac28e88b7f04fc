"""
Execution backends

Runner, configuration and result models, plus the SQLite backend.
"""

from .base import (
    ExecutionConfig,
    ExecutionResult,
    StatementBackend,
    StatementResult,
    StatementRunner,
)
from .sqlite import SQLiteBackend

__all__ = [
    "ExecutionConfig",
    "ExecutionResult",
    "StatementBackend",
    "StatementResult",
    "StatementRunner",
    "SQLiteBackend",
]
