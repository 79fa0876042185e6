"""
React Architecture Scaffolder

Creates React project skeletons from a fixed catalog of architecture
patterns, confined to an authorized base directory. Exposed as a CLI and
as MCP tools.
"""

__version__ = "0.1.0"

from react_scaffolder.core import ScaffoldError, ScaffoldResult, scaffold_project
from react_scaffolder.patterns import PATTERNS, PatternType

__all__ = [
    "PATTERNS",
    "PatternType",
    "ScaffoldError",
    "ScaffoldResult",
    "scaffold_project",
]
