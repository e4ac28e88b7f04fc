"""
sqlrev CLI Commands

Each command lives in its own module; cli.py only routes arguments.
"""

from .check import RevisionCheck, check_revisions, collect_revision_paths, print_check_report
from .run import print_execution_summary, run_revision
from .split import print_statements, split_revision

__all__ = [
    "RevisionCheck",
    "check_revisions",
    "collect_revision_paths",
    "print_check_report",
    "print_execution_summary",
    "run_revision",
    "print_statements",
    "split_revision",
]
