"""Static catalog of React architecture patterns.

Public API:
    PATTERNS: Read-only mapping of PatternType to PatternDefinition
    ARCHITECTURE_DESCRIPTION: Comparison text for the describe operation
    get_pattern / parse_pattern_type / list_pattern_types: Lookup helpers
    validate_catalog: Data invariant checks
"""

from .catalog import (
    ARCHITECTURE_DESCRIPTION,
    PATTERNS,
    get_pattern,
    list_pattern_types,
    parse_pattern_type,
    validate_catalog,
)
from .types import FileSpec, PatternDefinition, PatternType

__all__ = [
    "ARCHITECTURE_DESCRIPTION",
    "PATTERNS",
    "FileSpec",
    "PatternDefinition",
    "PatternType",
    "get_pattern",
    "list_pattern_types",
    "parse_pattern_type",
    "validate_catalog",
]
