"""Human- and machine-readable renderings of scaffold outcomes."""

from __future__ import annotations

import json
from typing import Literal

import yaml

from react_scaffolder.core.scaffold import ScaffoldResult

OutputFormat = Literal["text", "json", "yaml"]
OUTPUT_FORMATS: tuple[str, ...] = ("text", "json", "yaml")


def format_scaffold_report(result: ScaffoldResult) -> str:
    """Build the success message shown after a scaffold.

    The skipped line only appears when something was skipped. The
    next-steps block assumes the user runs it from the base directory.
    """
    lines = [
        f"✅ Successfully scaffolded: {result.label}",
        f"📁 Target: {result.resolved_target}",
        f"📂 Created {len(result.created_directories)} directories",
        f"📄 Created {len(result.created_files)} files",
    ]

    if result.skipped_files:
        lines.append(f"⚠️  Skipped {len(result.skipped_files)} existing files")

    lines.append("\n🚀 Next steps:")
    lines.append(f"  cd {result.resolved_target.name}")
    lines.append("  npm install")
    lines.append("  npm run dev")

    return "\n".join(lines)


def format_error(exc: BaseException) -> str:
    """Build the error message returned to a transport client."""
    message = getattr(exc, "message", None) or str(exc)
    return f"❌ Error: {message}"


def render_result(result: ScaffoldResult, fmt: OutputFormat = "text") -> str:
    """Render a result as text, JSON or YAML.

    Raises:
        ValueError: For an unsupported format.
    """
    if fmt == "text":
        return format_scaffold_report(result)
    if fmt == "json":
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    if fmt == "yaml":
        return yaml.safe_dump(
            result.to_dict(),
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        ).rstrip("\n")
    raise ValueError(f"Unsupported output format: {fmt}")
