"""Read-only catalog mapping pattern keys to their definitions.

The catalog is built once at import and shared by every scaffold call;
nothing mutates it afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import PurePosixPath
from types import MappingProxyType

from react_scaffolder.core.errors import UnknownPatternError
from react_scaffolder.patterns.atomic import ATOMIC
from react_scaffolder.patterns.clean import CLEAN
from react_scaffolder.patterns.feature import FEATURE
from react_scaffolder.patterns.layered import LAYERED
from react_scaffolder.patterns.types import PatternDefinition, PatternType

PATTERNS: Mapping[PatternType, PatternDefinition] = MappingProxyType(
    {
        PatternType.LAYERED: LAYERED,
        PatternType.FEATURE: FEATURE,
        PatternType.ATOMIC: ATOMIC,
        PatternType.CLEAN: CLEAN,
    }
)

ARCHITECTURE_DESCRIPTION = "\n".join(
    [
        "Layered (Standard):",
        "- Structure: /public, /src/components, /hooks, /services, /pages, /styles, /utils, /assets",
        "- Pros: Simple mental model, minimal ceremony, fast to onboard",
        "- Cons: Feature boundaries are loose; can grow into a monolith",
        "- Best for: Small apps and prototypes",
        "",
        "Feature-Based (Modular):",
        "- Structure: /public, /features/<feature> with internal components/hooks/api, /shared, /assets",
        "- Pros: Clear ownership by feature, scales with teams, easier refactors",
        "- Cons: Requires discipline in shared layers",
        "- Best for: Medium-to-large apps with multiple domains",
        "",
        "Atomic Design:",
        "- Structure: /public, /atoms, /molecules, /organisms, /templates, /pages, /assets",
        "- Pros: Strong design-system alignment, reusable UI building blocks",
        "- Cons: Can feel heavy for logic-heavy domains",
        "- Best for: Design-system heavy products",
        "",
        "Clean Architecture (Backend-Agnostic):",
        "- Structure: /public, /backend (entities/usecases/interfaces), /frontend (components/pages), /shared, /assets",
        "- Pros: Separation of concerns, testable core logic, backend-agnostic, long-term maintainability",
        "- Cons: More boilerplate and concepts to manage",
        "- Best for: Enterprise apps with complex business logic, full-stack applications",
        "- Note: Backend folder structure works with any backend language (.NET, Java, Python, Node.js)",
    ]
)


def list_pattern_types() -> list[str]:
    """Return the valid pattern keys in catalog order."""
    return [p.value for p in PatternType]


def parse_pattern_type(raw: object) -> PatternType:
    """Convert a raw key (string or PatternType) into a PatternType.

    Raises:
        UnknownPatternError: If ``raw`` is not one of the catalog keys.
    """
    if isinstance(raw, PatternType):
        return raw
    if isinstance(raw, str):
        try:
            return PatternType(raw)
        except ValueError:
            pass
    raise UnknownPatternError(raw, list_pattern_types())


def get_pattern(
    key: PatternType | str,
    catalog: Mapping[PatternType, PatternDefinition] | None = None,
) -> PatternDefinition:
    """Look up a pattern definition by key.

    Args:
        key: Pattern key.
        catalog: Alternative catalog (defaults to PATTERNS).

    Returns:
        The matching PatternDefinition.
    """
    source = PATTERNS if catalog is None else catalog
    pattern_type = parse_pattern_type(key)
    if pattern_type not in source:
        raise UnknownPatternError(pattern_type.value, [p.value for p in source])
    return source[pattern_type]


def _path_problems(kind: str, raw: str) -> list[str]:
    if not raw:
        return [f"{kind} path is empty"]
    path = PurePosixPath(raw)
    problems: list[str] = []
    if path.is_absolute() or "\\" in raw or ":" in path.parts[0]:
        problems.append(f"{kind} path '{raw}' is not relative")
    if ".." in path.parts:
        problems.append(f"{kind} path '{raw}' contains '..'")
    return problems


def validate_catalog(
    catalog: Mapping[PatternType, PatternDefinition] | None = None,
) -> list[str]:
    """Check pattern data invariants.

    Every directory and file path must be relative to the target root
    and free of ``..`` segments, and no file path may appear twice
    within one pattern.

    Returns:
        List of problems, each prefixed with the pattern key. Empty
        when the catalog is valid.
    """
    source = PATTERNS if catalog is None else catalog
    problems: list[str] = []

    for key, pattern in source.items():
        prefix = f"{PatternType(key).value}: "
        for directory in pattern.directories:
            problems.extend(prefix + p for p in _path_problems("directory", directory))

        seen: set[str] = set()
        for spec in pattern.files:
            problems.extend(prefix + p for p in _path_problems("file", spec.path))
            if spec.path in seen:
                problems.append(f"{prefix}duplicate file path '{spec.path}'")
            seen.add(spec.path)

    return problems
