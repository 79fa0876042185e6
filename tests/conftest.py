"""Shared fixtures for the scaffolder test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from react_scaffolder.helpers import helpers_logging
from react_scaffolder.helpers.settings import BASE_DIR_ENV_VAR
from react_scaffolder.patterns.types import FileSpec, PatternDefinition


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Disable colors, clear the base dir env var and reset the output stream."""
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv(BASE_DIR_ENV_VAR, raising=False)
    helpers_logging.use_stderr(False)
    yield
    helpers_logging.use_stderr(False)


@pytest.fixture()
def base_dir(tmp_path: Path) -> Path:
    """An existing authorized base directory."""
    base = tmp_path / "workspace"
    base.mkdir()
    return base


@pytest.fixture()
def tiny_pattern() -> PatternDefinition:
    """Small ad-hoc pattern: one directory, two files."""
    return PatternDefinition(
        label="T",
        directories=("src",),
        files=(
            FileSpec(path="src/a.txt", content=b"A"),
            FileSpec(path="b.txt", content=b"B"),
        ),
    )


def _snapshot_tree(root: Path) -> dict[str, bytes | None]:
    return {
        path.relative_to(root).as_posix(): (None if path.is_dir() else path.read_bytes())
        for path in sorted(root.rglob("*"))
    }


@pytest.fixture()
def snapshot_tree() -> Callable[[Path], dict[str, bytes | None]]:
    """Return a helper mapping every entry under a root to its bytes.

    Directories map to None.
    """
    return _snapshot_tree
