"""
MCP server exposing the React architecture scaffolder.

Tools:
    describe_architectures: Comparison of the available patterns
    scaffold_react_project: Create a project skeleton for one pattern

All writes are restricted to the base directory given to
``create_server`` (see ``helpers.settings.resolve_base_dir``). Targets
outside it are refused.

Transport is stdio, so nothing may be printed to stdout while serving.
Logging helpers are switched to stderr before the server starts.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from react_scaffolder.core.errors import ScaffoldError, UnknownToolError
from react_scaffolder.core.report import format_error, format_scaffold_report
from react_scaffolder.core.scaffold import scaffold_project
from react_scaffolder.helpers.helpers_logging import print_info, use_stderr
from react_scaffolder.helpers.settings import resolve_base_dir
from react_scaffolder.patterns.catalog import ARCHITECTURE_DESCRIPTION
from react_scaffolder.patterns.types import PatternType
from react_scaffolder.validators.request import validate_scaffold_request

SERVER_NAME = "react-architecture-scaffolder"

DESCRIBE_TOOL = "describe_architectures"
SCAFFOLD_TOOL = "scaffold_react_project"

DESCRIBE_DESCRIPTION = (
    "Compare common React architecture patterns and when to use each one."
)
SCAFFOLD_DESCRIPTION = (
    "Create a React architecture folder structure and placeholder files."
)
PATH_DESCRIPTION = "Target directory to scaffold."
PATTERN_TYPE_DESCRIPTION = "Architecture pattern: layered, feature, atomic, or clean."


def _describe() -> str:
    return ARCHITECTURE_DESCRIPTION


def _scaffold(arguments: Mapping[str, Any] | None, base_dir: Path) -> str:
    request = validate_scaffold_request(arguments)
    result = scaffold_project(request.target_path, request.pattern_type, base_dir)
    return format_scaffold_report(result)


def handle_tool_call(
    name: str,
    arguments: Mapping[str, Any] | None,
    base_dir: Path | str,
) -> str:
    """Dispatch a tool call by name and return its text result.

    Args:
        name: Tool name from the client request
        arguments: Raw tool arguments
        base_dir: Authorized base directory for scaffold targets

    Returns:
        Text content for the tool response

    Raises:
        ScaffoldError: Any validation or scaffolding failure, including
            unknown tool names
    """
    if name == DESCRIBE_TOOL:
        return _describe()
    if name == SCAFFOLD_TOOL:
        return _scaffold(arguments, Path(base_dir))
    raise UnknownToolError(name)


def create_server(base_dir: Path | str | None = None) -> FastMCP:
    """Build the FastMCP server bound to one base directory.

    Args:
        base_dir: Explicit base directory; falls back to the environment
            and then the current working directory.
    """
    return _build_server(resolve_base_dir(base_dir))


def _build_server(resolved_base: Path) -> FastMCP:
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name=DESCRIBE_TOOL, description=DESCRIBE_DESCRIPTION)
    def describe_architectures() -> str:
        return _call(DESCRIBE_TOOL, {}, resolved_base)

    @mcp.tool(name=SCAFFOLD_TOOL, description=SCAFFOLD_DESCRIPTION)
    def scaffold_react_project(
        path: Annotated[str, Field(description=PATH_DESCRIPTION)],
        pattern_type: Annotated[PatternType, Field(description=PATTERN_TYPE_DESCRIPTION)],
    ) -> str:
        return _call(
            SCAFFOLD_TOOL,
            {"path": path, "pattern_type": pattern_type},
            resolved_base,
        )

    return mcp


def _call(name: str, arguments: Mapping[str, Any], base_dir: Path) -> str:
    try:
        return handle_tool_call(name, arguments, base_dir)
    except ScaffoldError as exc:
        raise ToolError(format_error(exc)) from exc


def run_server(base_dir: Path | str | None = None) -> None:
    """Run the MCP server over stdio until the client disconnects."""
    use_stderr()
    resolved_base = resolve_base_dir(base_dir)
    mcp = _build_server(resolved_base)
    print_info(f"{SERVER_NAME} running on stdio (base: {resolved_base})")
    mcp.run()
