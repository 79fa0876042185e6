"""
Schema validation for scaffold requests coming from a transport.

The accepted shape is a mapping with exactly two string keys:

    {"path": "my-app", "pattern_type": "feature"}

Example:
    >>> request = validate_scaffold_request({"path": "app", "pattern_type": "clean"})
    >>> request.pattern_type
    <PatternType.CLEAN: 'clean'>
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from react_scaffolder.core.errors import RequestValidationError
from react_scaffolder.patterns.catalog import parse_pattern_type
from react_scaffolder.patterns.types import PatternType

REQUIRED_FIELDS: tuple[str, ...] = ("path", "pattern_type")


@dataclass(frozen=True)
class ScaffoldRequest:
    """A validated scaffold request.

    Attributes:
        target_path: Non-empty target path, still unresolved
        pattern_type: Pattern key from the closed catalog
    """
    target_path: str
    pattern_type: PatternType


def _require_string(arguments: Mapping[str, Any], field: str) -> str:
    if field not in arguments or arguments[field] is None:
        raise RequestValidationError(f"Missing required field '{field}'", field=field)
    value = arguments[field]
    if not isinstance(value, str):
        raise RequestValidationError(
            f"Field '{field}' must be a string, got {type(value).__name__}",
            field=field,
        )
    return value


def validate_scaffold_request(arguments: Mapping[str, Any] | None) -> ScaffoldRequest:
    """Validate raw tool arguments and build a ScaffoldRequest.

    Args:
        arguments: Raw argument mapping from the transport (may be None)

    Returns:
        ScaffoldRequest with the path untouched and the pattern key parsed

    Raises:
        RequestValidationError: On missing, extra, or malformed fields
        UnknownPatternError: When ``pattern_type`` is not a catalog key
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise RequestValidationError("Arguments must be an object")

    extra = sorted(str(key) for key in arguments if key not in REQUIRED_FIELDS)
    if extra:
        raise RequestValidationError(
            f"Unexpected field(s): {', '.join(extra)}",
            field=extra[0],
        )

    path = _require_string(arguments, "path")
    if not path:
        raise RequestValidationError("Field 'path' must not be empty", field="path")
    if "\x00" in path:
        raise RequestValidationError(
            "Field 'path' must not contain NUL bytes", field="path"
        )

    raw_pattern = _require_string(arguments, "pattern_type")
    return ScaffoldRequest(
        target_path=path,
        pattern_type=parse_pattern_type(raw_pattern),
    )
