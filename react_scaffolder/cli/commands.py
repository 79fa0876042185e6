"""
Command-line entry point for the React architecture scaffolder.

Usage:
    # Compare the available architectures
    react-scaffold describe

    # List pattern keys with their sizes
    react-scaffold patterns

    # Scaffold a feature-based project under the current directory
    react-scaffold scaffold my-app --pattern feature

    # Scaffold under an explicit base, machine-readable output
    react-scaffold scaffold my-app --pattern clean --base-dir ~/dev --format json

    # Serve the MCP tools over stdio
    react-scaffold serve --base-dir ~/dev
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from react_scaffolder import __version__
from react_scaffolder.core.errors import (
    RequestValidationError,
    ScaffoldError,
    SecurityViolationError,
)
from react_scaffolder.core.report import OUTPUT_FORMATS, render_result
from react_scaffolder.core.scaffold import EventKind, scaffold_project
from react_scaffolder.helpers.helpers_logging import (
    print_header,
    print_info,
    print_skip,
    print_success,
)
from react_scaffolder.helpers.settings import BASE_DIR_ENV_VAR, resolve_base_dir
from react_scaffolder.patterns.catalog import (
    ARCHITECTURE_DESCRIPTION,
    PATTERNS,
    list_pattern_types,
)
from react_scaffolder.validators.request import validate_scaffold_request

EXIT_ERROR = 1
EXIT_SECURITY_VIOLATION = 2
EXIT_CANCELLED = 130

_BASE_DIR_HELP = (
    f"Directory every target must stay inside "
    f"(default: ${BASE_DIR_ENV_VAR} or the current directory)"
)


def _exit_code_for(exc: ScaffoldError) -> int:
    if isinstance(exc, SecurityViolationError):
        return EXIT_SECURITY_VIOLATION
    return EXIT_ERROR


def _print_event(kind: EventKind, relative_path: str) -> None:
    if kind == "dir":
        print_success(f"Created directory: {relative_path}")
    elif kind == "file":
        print_success(f"Created file: {relative_path}")
    else:
        print_skip(f"Skipped (exists): {relative_path}")


# ============================================================================

@click.group(name="react-scaffold", invoke_without_command=True)
@click.version_option(__version__, prog_name="react-scaffold")
@click.pass_context
def cli(ctx: click.Context) -> int:
    """Scaffold React projects from predefined architecture patterns."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
    return 0


@cli.command(name="describe", help="Compare the available architecture patterns")
def describe_cmd() -> int:
    click.echo(ARCHITECTURE_DESCRIPTION)
    return 0


@cli.command(name="patterns", help="List pattern keys, labels and sizes")
def patterns_cmd() -> int:
    width = max(len(key) for key in list_pattern_types())
    for pattern_type, pattern in PATTERNS.items():
        click.echo(
            f"  {pattern_type.value:<{width}}  {pattern.label}  "
            f"({len(pattern.directories)} directories, {len(pattern.files)} files)"
        )
    return 0


@cli.command(name="scaffold", help="Scaffold a project at PATH")
@click.argument("path")
@click.option(
    "--pattern", "-p", "pattern_type",
    type=click.Choice(list_pattern_types()),
    required=True,
    help="Architecture pattern to scaffold",
)
@click.option("--base-dir", type=click.Path(file_okay=False), help=_BASE_DIR_HELP)
@click.option(
    "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="text",
    show_default=True,
    help="Output format of the final report",
)
@click.option("--quiet", "-q", is_flag=True, help="Suppress per-entry progress")
@click.pass_context
def scaffold_cmd(
    ctx: click.Context,
    path: str,
    pattern_type: str,
    base_dir: str | None,
    output_format: str,
    quiet: bool,
) -> int:
    try:
        request = validate_scaffold_request({"path": path, "pattern_type": pattern_type})
    except RequestValidationError as exc:
        raise click.BadParameter(exc.message, ctx=ctx, param_hint="'PATH'") from exc

    base = resolve_base_dir(base_dir)
    verbose = output_format == "text" and not quiet

    if verbose:
        print_header(f"Scaffolding '{pattern_type}' project")
        print_info(f"Base directory: {base}")

    try:
        result = scaffold_project(
            request.target_path,
            request.pattern_type,
            base,
            on_event=_print_event if verbose else None,
        )
    except ScaffoldError as exc:
        exc.print_error()
        ctx.exit(_exit_code_for(exc))

    if verbose:
        click.echo()
    click.echo(render_result(result, output_format))  # type: ignore[arg-type]
    return 0


@cli.command(name="serve", help="Run the MCP server over stdio")
@click.option("--base-dir", type=click.Path(file_okay=False), help=_BASE_DIR_HELP)
def serve_cmd(base_dir: str | None) -> int:
    from react_scaffolder.server import run_server

    run_server(Path(base_dir) if base_dir else None)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = sys.argv[1:] if argv is None else argv

    try:
        result = cli.main(
            args=args,
            prog_name="react-scaffold",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return EXIT_CANCELLED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
