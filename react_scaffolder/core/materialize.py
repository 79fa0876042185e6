"""Idempotent directory and no-clobber file creation."""

from __future__ import annotations

from pathlib import Path

from react_scaffolder.core.errors import DirectoryCreationError, FileCreationError


def ensure_directory(path: Path) -> None:
    """Create ``path`` and any missing ancestors; existing directories are fine.

    Raises:
        DirectoryCreationError: On permission errors, a file in the way,
            disk full, or an invalid path.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as exc:
        raise DirectoryCreationError(path, exc) from exc


def ensure_file(path: Path, content: bytes) -> bool:
    """Create ``path`` with exactly ``content`` unless it already exists.

    The write uses exclusive-create mode, so a file that appears between
    runs (or in a concurrent run) is never truncated. Existing files are
    not opened or compared with ``content``.

    Args:
        path: Absolute file path.
        content: Bytes to write.

    Returns:
        True if the file was written, False if it already existed.

    Raises:
        FileCreationError: For any failure other than pre-existence,
            including failure to create the parent directories.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as exc:
        raise FileCreationError(path, exc) from exc

    try:
        with path.open("xb") as fh:
            fh.write(content)
    except FileExistsError:
        return False
    except (OSError, ValueError) as exc:
        raise FileCreationError(path, exc) from exc
    return True
