"""Tests for result rendering."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from react_scaffolder.core.errors import SecurityViolationError
from react_scaffolder.core.report import format_error, format_scaffold_report, render_result
from react_scaffolder.core.scaffold import ScaffoldResult


@pytest.fixture()
def result() -> ScaffoldResult:
    return ScaffoldResult(
        resolved_target=Path("/srv/base/my-app"),
        created_directories=("public", "src"),
        created_files=("a.txt", "b.txt", "c.txt"),
        skipped_files=(),
        label="Feature-Based (Modular)",
    )


class TestFormatScaffoldReport:
    """Success text shown to humans and MCP clients."""

    def test_full_text(self, result: ScaffoldResult) -> None:
        assert format_scaffold_report(result) == (
            "✅ Successfully scaffolded: Feature-Based (Modular)\n"
            f"📁 Target: {Path('/srv/base/my-app')}\n"
            "📂 Created 2 directories\n"
            "📄 Created 3 files\n"
            "\n"
            "🚀 Next steps:\n"
            "  cd my-app\n"
            "  npm install\n"
            "  npm run dev"
        )

    def test_skipped_line_only_when_nonzero(self, result: ScaffoldResult) -> None:
        assert "Skipped" not in format_scaffold_report(result)

        rerun = ScaffoldResult(
            resolved_target=result.resolved_target,
            created_directories=result.created_directories,
            created_files=(),
            skipped_files=("a.txt", "b.txt"),
            label=result.label,
        )
        text = format_scaffold_report(rerun)
        assert "📄 Created 0 files" in text
        assert "⚠️  Skipped 2 existing files" in text


class TestFormatError:
    """Error text returned to transport clients."""

    def test_scaffold_error(self) -> None:
        err = SecurityViolationError("../x", "/base")
        assert format_error(err) == (
            "❌ Error: Security violation: Target path '../x' must be within '/base'."
        )

    def test_plain_exception(self) -> None:
        assert format_error(RuntimeError("boom")) == "❌ Error: boom"


class TestRenderResult:
    """Machine-readable renderings carry the same data."""

    def test_text(self, result: ScaffoldResult) -> None:
        assert render_result(result, "text") == format_scaffold_report(result)

    def test_json(self, result: ScaffoldResult) -> None:
        assert json.loads(render_result(result, "json")) == result.to_dict()

    def test_yaml(self, result: ScaffoldResult) -> None:
        rendered = render_result(result, "yaml")
        assert yaml.safe_load(rendered) == result.to_dict()
        assert rendered.splitlines()[0] == "label: Feature-Based (Modular)"

    def test_unknown_format(self, result: ScaffoldResult) -> None:
        with pytest.raises(ValueError, match="Unsupported output format"):
            render_result(result, "toml")  # type: ignore[arg-type]
