"""Scaffold orchestration: validate the root, then materialize a pattern.

Processing order is the literal declaration order of the pattern, so two
runs of the same pattern always report entries in the same order. Nothing
is rolled back on failure; re-running is safe because directories are
created idempotently and files are never overwritten.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from react_scaffolder.core.materialize import ensure_directory, ensure_file
from react_scaffolder.core.path_guard import resolve_safe_target
from react_scaffolder.patterns.catalog import get_pattern
from react_scaffolder.patterns.types import PatternDefinition, PatternType

EventKind = Literal["dir", "file", "skip"]
ScaffoldEventHandler = Callable[[EventKind, str], None]


@dataclass(frozen=True)
class ScaffoldResult:
    """Snapshot of what one scaffold call did.

    Attributes:
        resolved_target: Absolute target root actually used.
        created_directories: Pattern directories ensured this run, in order.
            Directories that already existed are included.
        created_files: Files written this run, in order.
        skipped_files: Files left untouched because they already existed.
        label: Display name of the pattern.
    """

    resolved_target: Path
    created_directories: tuple[str, ...]
    created_files: tuple[str, ...]
    skipped_files: tuple[str, ...]
    label: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "resolved_target": str(self.resolved_target),
            "created_directories": list(self.created_directories),
            "created_files": list(self.created_files),
            "skipped_files": list(self.skipped_files),
        }


def _to_native(root: Path, relative: str) -> Path:
    return root.joinpath(*relative.split("/"))


def scaffold_project(
    target_path: str,
    pattern_type: PatternType | str | PatternDefinition,
    base_dir: Path | str,
    *,
    catalog: Mapping[PatternType, PatternDefinition] | None = None,
    on_event: ScaffoldEventHandler | None = None,
) -> ScaffoldResult:
    """Scaffold ``pattern_type`` into ``target_path`` under ``base_dir``.

    Args:
        target_path: Caller-supplied target (relative or absolute).
        pattern_type: Pattern key, or a PatternDefinition used as-is.
        base_dir: Authorized base directory; the target must stay inside it.
        catalog: Alternative pattern catalog for key lookups.
        on_event: Called with ``("dir" | "file" | "skip", relative_path)``
            after each entry is processed.

    Returns:
        ScaffoldResult describing what was created and skipped.

    Raises:
        SecurityViolationError: If the target escapes ``base_dir``.
        DirectoryCreationError: If a directory cannot be created.
        FileCreationError: If a file cannot be written.
    """
    resolved_target = resolve_safe_target(target_path, base_dir)

    if isinstance(pattern_type, PatternDefinition):
        pattern = pattern_type
    else:
        pattern = get_pattern(pattern_type, catalog)

    ensure_directory(resolved_target)

    created_dirs: list[str] = []
    created_files: list[str] = []
    skipped_files: list[str] = []

    for directory in pattern.directories:
        ensure_directory(_to_native(resolved_target, directory))
        created_dirs.append(directory)
        if on_event is not None:
            on_event("dir", directory)

    for spec in pattern.files:
        created = ensure_file(_to_native(resolved_target, spec.path), spec.content)
        if created:
            created_files.append(spec.path)
        else:
            skipped_files.append(spec.path)
        if on_event is not None:
            on_event("file" if created else "skip", spec.path)

    return ScaffoldResult(
        resolved_target=resolved_target,
        created_directories=tuple(created_dirs),
        created_files=tuple(created_files),
        skipped_files=tuple(skipped_files),
        label=pattern.label,
    )
