"""
Revision file access.

Reads revision scripts from disk and hands their content to the splitter.
"""

from pathlib import Path

from sqlrev.domain.errors import RevisionFileError

from .statements import StatementGroup, parse

REVISION_SUFFIX = ".sql"


def read_revision_text(path: Path, encoding: str = "utf-8") -> str:
    """Read the raw content of a revision file.

    Raises:
        RevisionFileError: If the path is missing, not a file, or not
            decodable with ``encoding``.
    """
    if not path.exists():
        raise RevisionFileError(
            message=f"Revision file not found: {path}", code="revision_not_found"
        )
    if not path.is_file():
        raise RevisionFileError(
            message=f"Revision path is not a file: {path}", code="revision_not_file"
        )
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise RevisionFileError(
            message=f"Could not decode {path} as {encoding}: {e}", code="revision_decode_error"
        ) from e


def load_revision(path: Path, encoding: str = "utf-8") -> StatementGroup:
    """Read a revision file and split it into statements."""
    return parse(read_revision_text(path, encoding=encoding))


def find_revision_files(directory: Path) -> list[Path]:
    """Revision files in ``directory``, sorted by name."""
    if not directory.is_dir():
        raise RevisionFileError(
            message=f"Revision directory not found: {directory}", code="revision_dir_not_found"
        )
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.suffix == REVISION_SUFFIX),
        key=lambda p: p.name,
    )
