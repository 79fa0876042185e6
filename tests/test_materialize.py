"""Tests for directory and file materializers."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from react_scaffolder.core.errors import DirectoryCreationError, FileCreationError
from react_scaffolder.core.materialize import ensure_directory, ensure_file


class TestEnsureDirectory:
    """Directory creation is idempotent and creates ancestors."""

    def test_creates_nested_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "c"
        ensure_directory(target)
        assert target.is_dir()

    def test_existing_directory_is_fine(self, tmp_path: Path) -> None:
        target = tmp_path / "exists"
        target.mkdir()
        (target / "keep.txt").write_text("keep")

        ensure_directory(target)
        ensure_directory(target)

        assert (target / "keep.txt").read_text() == "keep"

    def test_file_in_the_way_fails(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("x")

        with pytest.raises(DirectoryCreationError) as exc_info:
            ensure_directory(blocker / "child")

        assert exc_info.value.path == str(blocker / "child")
        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.message.startswith("Failed to create directory")

    def test_permission_error_is_wrapped(self, tmp_path: Path) -> None:
        with patch.object(Path, "mkdir", side_effect=PermissionError("denied")):
            with pytest.raises(DirectoryCreationError) as exc_info:
                ensure_directory(tmp_path / "nope")

        assert "denied" in exc_info.value.message
        assert isinstance(exc_info.value.cause, PermissionError)


class TestEnsureFile:
    """Files are written once and never overwritten."""

    def test_creates_file_with_exact_bytes(self, tmp_path: Path) -> None:
        target = tmp_path / "f.txt"
        assert ensure_file(target, b"hello\n") is True
        assert target.read_bytes() == b"hello\n"

    def test_creates_missing_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "x" / "y" / "f.txt"
        assert ensure_file(target, b"") is True
        assert target.read_bytes() == b""

    def test_existing_file_is_skipped_untouched(self, tmp_path: Path) -> None:
        target = tmp_path / "f.txt"
        target.write_bytes(b"user edits")

        assert ensure_file(target, b"template") is False
        assert target.read_bytes() == b"user edits"

    def test_existing_directory_at_file_path_is_skipped(self, tmp_path: Path) -> None:
        target = tmp_path / "dir-not-file"
        target.mkdir()

        assert ensure_file(target, b"x") is False
        assert target.is_dir()

    def test_second_call_reports_skip(self, tmp_path: Path) -> None:
        target = tmp_path / "f.txt"
        assert ensure_file(target, b"one") is True
        assert ensure_file(target, b"two") is False
        assert target.read_bytes() == b"one"

    def test_parent_blocked_by_file_fails(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("x")

        with pytest.raises(FileCreationError) as exc_info:
            ensure_file(blocker / "f.txt", b"x")

        assert exc_info.value.path == str(blocker / "f.txt")
        assert exc_info.value.message.startswith("Failed to create file")

    def test_write_failure_is_wrapped(self, tmp_path: Path) -> None:
        with patch.object(Path, "open", side_effect=OSError(28, "No space left")):
            with pytest.raises(FileCreationError) as exc_info:
                ensure_file(tmp_path / "f.txt", b"x")

        assert "No space left" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, OSError)
