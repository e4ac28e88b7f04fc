"""
JSON envelopes printed by ``sqlrev split|check|run --json``.

Every envelope has the same top-level keys; ``status`` and the exit code
follow from whether any error entries are present.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any, Literal

from .errors import SqlrevDomainError

SCHEMA_VERSION = "1"

Command = Literal["split", "check", "run"]


@dataclass(slots=True, frozen=True)
class EnvelopeError:
    """One failure; ``path`` names the revision file when there is one."""

    code: str
    message: str
    path: str | None = None

    @classmethod
    def from_exception(cls, exc: Exception) -> EnvelopeError:
        if isinstance(exc, SqlrevDomainError):
            return cls(code=exc.code, message=exc.message)
        return cls(code="error", message=str(exc))

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.path is not None:
            payload["path"] = self.path
        return payload


@dataclass(slots=True, frozen=True)
class Envelope:
    command: Command
    data: dict[str, Any] | None
    duration_ms: int
    errors: tuple[EnvelopeError, ...] = ()

    @property
    def status(self) -> str:
        return "error" if self.errors else "success"

    @property
    def exit_code(self) -> int:
        return 1 if self.errors else 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "schemaVersion": SCHEMA_VERSION,
            "command": self.command,
            "status": self.status,
            "data": self.data,
            "errors": [error.to_dict() for error in self.errors],
            "meta": {"durationMs": self.duration_ms, "exitCode": self.exit_code},
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


def split_envelope(path: str, statements: list[str], started: float) -> Envelope:
    """Statements of one revision file, in execution order."""
    data = {"path": path, "count": len(statements), "statements": statements}
    return Envelope(command="split", data=data, duration_ms=_elapsed_ms(started))


def check_envelope(revisions: list[dict[str, Any]], started: float) -> Envelope:
    """Per-file check outcomes; each rejected file also becomes an error entry."""
    errors = tuple(
        EnvelopeError(
            code=revision["errorCode"] or "error",
            message=revision["errorMessage"] or "",
            path=revision["path"],
        )
        for revision in revisions
        if not revision["ok"]
    )
    return Envelope(
        command="check",
        data={"revisions": revisions},
        duration_ms=_elapsed_ms(started),
        errors=errors,
    )


def run_envelope(result: dict[str, Any], started: float) -> Envelope:
    """Execution result of a revision; anything short of success is an error."""
    errors: tuple[EnvelopeError, ...] = ()
    if result["status"] != "success":
        errors = (
            EnvelopeError(code="statement_failed", message=result["error_message"] or ""),
        )
    return Envelope(command="run", data=result, duration_ms=_elapsed_ms(started), errors=errors)


def failure_envelope(command: Command, exc: Exception, started: float) -> Envelope:
    """A command that stopped before producing its payload."""
    return Envelope(
        command=command,
        data=None,
        duration_ms=_elapsed_ms(started),
        errors=(EnvelopeError.from_exception(exc),),
    )
