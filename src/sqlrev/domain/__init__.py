"""Domain contracts shared by the core, backends and CLI."""

from .envelopes import (
    Envelope,
    EnvelopeError,
    check_envelope,
    failure_envelope,
    run_envelope,
    split_envelope,
)
from .errors import (
    ReservedCommandError,
    RevisionFileError,
    RevisionParseError,
    SqlrevDomainError,
    StatementExecutionError,
)

__all__ = [
    "Envelope",
    "EnvelopeError",
    "check_envelope",
    "failure_envelope",
    "run_envelope",
    "split_envelope",
    "ReservedCommandError",
    "RevisionFileError",
    "RevisionParseError",
    "SqlrevDomainError",
    "StatementExecutionError",
]
