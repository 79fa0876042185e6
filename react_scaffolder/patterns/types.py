"""Type definitions for the pattern catalog.

A pattern is static data: an ordered tuple of directories and an ordered
tuple of files with their exact bytes. Paths are POSIX-style and relative
to the scaffold target root.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum


class PatternType(str, Enum):
    """Closed set of architecture pattern keys."""

    LAYERED = "layered"
    FEATURE = "feature"
    ATOMIC = "atomic"
    CLEAN = "clean"


@dataclass(frozen=True)
class FileSpec:
    """A single file placed by a pattern.

    Attributes:
        path: Path relative to the target root (e.g., 'src/App.tsx').
        content: Exact bytes written on first creation.
    """

    path: str
    content: bytes


@dataclass(frozen=True)
class PatternDefinition:
    """Immutable pattern definition.

    Attributes:
        label: Display name shown in reports.
        directories: Directories in creation order; ancestors are implied.
        files: Files in creation order.
    """

    label: str
    directories: tuple[str, ...]
    files: tuple[FileSpec, ...]


def text_file(path: str, text: str) -> FileSpec:
    """Build a FileSpec from text, stored as UTF-8."""
    return FileSpec(path=path, content=text.encode("utf-8"))


def json_file(path: str, data: dict[str, object]) -> FileSpec:
    """Build a FileSpec holding ``data`` as two-space indented JSON.

    No trailing newline is written.
    """
    return text_file(path, json.dumps(data, indent=2, ensure_ascii=False))
