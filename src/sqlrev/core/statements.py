"""
Revision script statements.

Splits a raw multi-statement script into individual statements so that a
runner can execute, time and report on each one. There is no validation or
statement preparation here beyond rejecting transaction-control commands.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from sqlrev.domain.errors import ReservedCommandError

from .scanner import Scanner

COMMENT_MARKER = "--"

# Checked in this order; the first prefix match wins
RESERVED_COMMANDS = ("begin", "savepoint", "rollback", "commit")
RESERVED_PREFIX_LENGTH = 10

# Unicode White_Space, which excludes the \x1c-\x1f separators
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


@dataclass(frozen=True, slots=True)
class Statement:
    """A single trimmed, non-empty SQL statement."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class StatementGroup:
    """Ordered statements parsed from one revision script."""

    statements: tuple[Statement, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> StatementGroup:
        return parse(text)

    def iter(self) -> Iterator[Statement]:
        return iter(self.statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    def __getitem__(self, index: int) -> Statement:
        return self.statements[index]

    def texts(self) -> list[str]:
        """Statement texts as plain strings, in order."""
        return [statement.text for statement in self.statements]


def _lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping one ``\\r`` per line and the empty tail."""
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines and not lines[-1]:
        lines.pop()
    return lines


def strip_comment_lines(text: str) -> str:
    """Drop every line whose stripped form starts with ``--``.

    Only whole-line comments are removed. Trailing comments after code and
    block comments pass through untouched. Other line separators such as
    form feeds are ordinary characters and are kept verbatim.
    """
    return "".join(
        f"{line}\n"
        for line in _lines(text)
        if not line.strip(WHITESPACE).startswith(COMMENT_MARKER)
    )


def split_fragments(text: str) -> list[str]:
    """Run a fresh scanner over ``text`` and return its raw fragments."""
    scanner = Scanner()
    scanner.feed(text)
    return scanner.fragments


def check_reserved_commands(statements: Iterable[Statement]) -> None:
    """Raise ReservedCommandError for the first statement opening with a reserved command.

    Only the first few characters are inspected, lowercased, as a plain
    prefix. ``commitment`` is rejected just like ``commit``.
    """
    for statement in statements:
        lowered = statement.text[:RESERVED_PREFIX_LENGTH].lower()
        for command in RESERVED_COMMANDS:
            if lowered.startswith(command):
                raise ReservedCommandError(command)


def parse(text: str) -> StatementGroup:
    """Split a revision script into statements.

    Args:
        text: Full script content.

    Returns:
        StatementGroup with trimmed, non-empty statements in source order.

    Raises:
        ReservedCommandError: If any statement starts with BEGIN, SAVEPOINT,
            ROLLBACK or COMMIT. No statements are returned in that case.
    """
    fragments = split_fragments(strip_comment_lines(text))
    trimmed = (fragment.strip(WHITESPACE) for fragment in fragments)
    statements = tuple(Statement(fragment) for fragment in trimmed if fragment)
    check_reserved_commands(statements)
    return StatementGroup(statements)
