"""
Character scanner that cuts a script into raw statement fragments.

Only the quoting context matters here: a semicolon ends a fragment unless
it sits inside a single-quoted string or a double-quoted identifier. No
other SQL syntax is recognized.
"""

from enum import Enum


class ScanMode(Enum):
    """Quoting context of the scanner."""

    UNQUOTED = "unquoted"
    IN_STRING = "in_string"
    IN_DELIMITED_IDENTIFIER = "in_delimited_identifier"


STRING_QUOTE = "'"
IDENTIFIER_QUOTE = '"'
STATEMENT_TERMINATOR = ";"


class Scanner:
    """Accepts one character at a time and accumulates fragments.

    Quote characters are kept verbatim in the fragment text; they only
    change the mode. Terminating semicolons are consumed and never stored.
    """

    def __init__(self) -> None:
        self.mode = ScanMode.UNQUOTED
        self._completed: list[str] = []
        self._current: list[str] = []

    def accept(self, char: str) -> None:
        """Append ``char`` to the current fragment or end the fragment."""
        if char == STRING_QUOTE:
            # A single quote inside a delimited identifier is plain text
            if self.mode is ScanMode.UNQUOTED:
                self.mode = ScanMode.IN_STRING
            elif self.mode is ScanMode.IN_STRING:
                self.mode = ScanMode.UNQUOTED
        elif char == IDENTIFIER_QUOTE:
            if self.mode is ScanMode.UNQUOTED:
                self.mode = ScanMode.IN_DELIMITED_IDENTIFIER
            elif self.mode is ScanMode.IN_DELIMITED_IDENTIFIER:
                self.mode = ScanMode.UNQUOTED
        elif char == STATEMENT_TERMINATOR and self.mode is ScanMode.UNQUOTED:
            self._completed.append("".join(self._current))
            self._current = []
            return

        self._current.append(char)

    def feed(self, text: str) -> None:
        """Accept every character of ``text`` in order."""
        for char in text:
            self.accept(char)

    @property
    def fragments(self) -> list[str]:
        """All fragments so far, untrimmed, ending with the open one."""
        return [*self._completed, "".join(self._current)]
