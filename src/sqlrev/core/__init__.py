"""
Core

Provider-agnostic handling of revision scripts:
- Scanner: quote-aware fragment scanning
- Statements: splitting scripts and rejecting transaction commands
- Storage: reading revision files
"""

from .scanner import ScanMode, Scanner
from .statements import (
    RESERVED_COMMANDS,
    Statement,
    StatementGroup,
    check_reserved_commands,
    parse,
    split_fragments,
    strip_comment_lines,
)
from .storage import find_revision_files, load_revision, read_revision_text

__all__ = [
    # Scanner
    "ScanMode",
    "Scanner",
    # Statements
    "RESERVED_COMMANDS",
    "Statement",
    "StatementGroup",
    "check_reserved_commands",
    "parse",
    "split_fragments",
    "strip_comment_lines",
    # Storage
    "find_revision_files",
    "load_revision",
    "read_revision_text",
]
