"""Resolve caller-supplied target paths against an authorized base directory.

The check runs after normalization, so ``../``, ``..\\``, redundant ``./``
and doubled separators are all handled by the same test: the path from the
base to the resolved target must not climb out of the base.

Symlinks are not resolved. A symlink inside the base that points elsewhere
is followed by the filesystem on write; this is a known limitation.
"""

from __future__ import annotations

import os
from pathlib import Path

from react_scaffolder.core.errors import SecurityViolationError


def _escapes(relative: str) -> bool:
    parts = Path(relative).parts
    return (bool(parts) and parts[0] == os.pardir) or os.path.isabs(relative)


def resolve_safe_target(input_path: str, base_dir: Path | str) -> Path:
    """Resolve ``input_path`` against ``base_dir`` and reject escapes.

    Args:
        input_path: Relative or absolute target path from the caller.
        base_dir: Absolute, trusted base directory.

    Returns:
        The resolved absolute target path.

    Raises:
        SecurityViolationError: If the target lies outside ``base_dir``.

    Example:
        >>> resolve_safe_target("my-app", "/tmp/X")
        PosixPath('/tmp/X/my-app')
    """
    base = os.path.normpath(os.path.abspath(str(base_dir)))
    resolved = os.path.normpath(os.path.join(base, input_path))

    try:
        relative = os.path.relpath(resolved, base)
    except ValueError as exc:
        # Different drive on Windows: not expressible relative to base.
        raise SecurityViolationError(input_path, base) from exc

    if _escapes(relative):
        raise SecurityViolationError(input_path, base)

    return Path(resolved)


def is_within(path: Path | str, base_dir: Path | str) -> bool:
    """Return True if ``path`` resolves inside ``base_dir`` (never raises)."""
    try:
        resolve_safe_target(str(path), base_dir)
    except SecurityViolationError:
        return False
    return True
