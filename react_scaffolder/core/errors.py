"""Error types raised by the scaffolding engine.

Every fatal failure surfaces as a subclass of ``ScaffoldError`` so callers
can script against the failure kind instead of matching message strings.
A file that already exists is not an error and has no type here.
"""

from __future__ import annotations

from pathlib import Path

from react_scaffolder.helpers.helpers_logging import print_error


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def print_error(self) -> None:
        """Print the error message using the logging helper."""
        print_error(self.message)


class SecurityViolationError(ScaffoldError):
    """Raised when a target path resolves outside the authorized base directory."""

    def __init__(self, input_path: str, base_dir: Path | str) -> None:
        self.input_path = input_path
        self.base_dir = str(base_dir)
        super().__init__(
            f"Security violation: Target path '{input_path}' "
            f"must be within '{self.base_dir}'."
        )


class DirectoryCreationError(ScaffoldError):
    """Raised when a directory (or one of its ancestors) cannot be created."""

    def __init__(self, path: Path | str, cause: BaseException) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Failed to create directory '{self.path}': {cause}")


class FileCreationError(ScaffoldError):
    """Raised when a file cannot be written for any reason other than pre-existence."""

    def __init__(self, path: Path | str, cause: BaseException) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Failed to create file '{self.path}': {cause}")


class RequestValidationError(ScaffoldError):
    """Raised when a transport request does not match the scaffold schema."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class UnknownPatternError(RequestValidationError):
    """Raised for a pattern key outside the closed catalog."""

    def __init__(self, pattern_type: object, valid: list[str]) -> None:
        self.pattern_type = pattern_type
        self.valid = valid
        super().__init__(
            f"Unknown pattern_type '{pattern_type}'. "
            f"Expected one of: {', '.join(valid)}",
            field="pattern_type",
        )


class UnknownToolError(ScaffoldError):
    """Raised when a client calls a tool the server does not expose."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")
