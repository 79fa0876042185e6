"""Core scaffolding engine: path guard, materializers and orchestrator."""

from react_scaffolder.core.errors import (
    DirectoryCreationError,
    FileCreationError,
    RequestValidationError,
    ScaffoldError,
    SecurityViolationError,
    UnknownPatternError,
    UnknownToolError,
)
from react_scaffolder.core.materialize import ensure_directory, ensure_file
from react_scaffolder.core.path_guard import is_within, resolve_safe_target
from react_scaffolder.core.scaffold import ScaffoldResult, scaffold_project

__all__ = [
    "DirectoryCreationError",
    "FileCreationError",
    "RequestValidationError",
    "ScaffoldError",
    "ScaffoldResult",
    "SecurityViolationError",
    "UnknownPatternError",
    "UnknownToolError",
    "ensure_directory",
    "ensure_file",
    "is_within",
    "resolve_safe_target",
    "scaffold_project",
]
