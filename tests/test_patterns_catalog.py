"""Tests for the static pattern catalog."""

from __future__ import annotations

import json
from types import MappingProxyType

import pytest

from react_scaffolder.core.errors import UnknownPatternError
from react_scaffolder.patterns import (
    ARCHITECTURE_DESCRIPTION,
    PATTERNS,
    FileSpec,
    PatternDefinition,
    PatternType,
    get_pattern,
    list_pattern_types,
    parse_pattern_type,
    validate_catalog,
)


def _file(pattern_type: PatternType, path: str) -> FileSpec:
    matches = [f for f in PATTERNS[pattern_type].files if f.path == path]
    assert len(matches) == 1, f"{pattern_type.value} has no single {path}"
    return matches[0]


class TestCatalogShape:
    """The catalog is a closed, read-only set of four patterns."""

    def test_keys(self) -> None:
        assert list_pattern_types() == ["layered", "feature", "atomic", "clean"]
        assert set(PATTERNS) == set(PatternType)

    def test_read_only(self) -> None:
        assert isinstance(PATTERNS, MappingProxyType)
        with pytest.raises(TypeError):
            PATTERNS[PatternType.LAYERED] = PATTERNS[PatternType.CLEAN]  # type: ignore[index]

    def test_labels(self) -> None:
        assert PATTERNS[PatternType.LAYERED].label == "Layered (Standard)"
        assert PATTERNS[PatternType.FEATURE].label == "Feature-Based (Modular)"
        assert PATTERNS[PatternType.ATOMIC].label == "Atomic Design"
        assert PATTERNS[PatternType.CLEAN].label == (
            "Clean Architecture (Backend-Agnostic)"
        )

    def test_shipped_catalog_is_valid(self) -> None:
        assert validate_catalog() == []

    @pytest.mark.parametrize("pattern_type", list(PatternType))
    def test_every_pattern_has_entry_files(self, pattern_type: PatternType) -> None:
        paths = {f.path for f in PATTERNS[pattern_type].files}
        for required in (
            "package.json",
            "tsconfig.json",
            "tsconfig.node.json",
            "vite.config.ts",
            "public/index.html",
            "public/vite.svg",
            "src/App.tsx",
            "src/main.tsx",
            ".gitignore",
            "README.md",
        ):
            assert required in paths

    @pytest.mark.parametrize("pattern_type", list(PatternType))
    def test_json_files_parse(self, pattern_type: PatternType) -> None:
        for spec in PATTERNS[pattern_type].files:
            if spec.path.endswith(".json"):
                json.loads(spec.content.decode("utf-8"))


class TestPatternContent:
    """Spot checks on the generated file contents."""

    def test_layered_directories_start_with_public(self) -> None:
        assert PATTERNS[PatternType.LAYERED].directories[:3] == (
            "public",
            "src/components",
            "src/hooks",
        )

    def test_layered_index_html_has_description(self) -> None:
        html = _file(PatternType.LAYERED, "public/index.html").content.decode()
        assert '<meta name="description"' in html
        assert "<title>React App</title>" in html

    def test_feature_aliases(self) -> None:
        tsconfig = json.loads(_file(PatternType.FEATURE, "tsconfig.json").content)
        assert tsconfig["compilerOptions"]["paths"] == {
            "@features/*": ["src/features/*"],
            "@shared/*": ["src/shared/*"],
            "@assets/*": ["src/assets/*"],
        }

    def test_feature_slices(self) -> None:
        directories = PATTERNS[PatternType.FEATURE].directories
        assert "src/features/auth/api" in directories
        assert "src/features/dashboard/hooks" in directories

    def test_atomic_storybook_scripts(self) -> None:
        package = json.loads(_file(PatternType.ATOMIC, "package.json").content)
        assert package["scripts"]["storybook"] == "storybook dev -p 6006"
        gitignore = _file(PatternType.ATOMIC, ".gitignore").content.decode()
        assert "storybook-static" in gitignore

    def test_clean_dev_dependencies_include_vitest(self) -> None:
        package = json.loads(_file(PatternType.CLEAN, "package.json").content)
        assert package["devDependencies"]["vitest"] == "^1.6.0"
        assert package["devDependencies"]["typescript"] == "^5.2.2"

    def test_clean_layers(self) -> None:
        directories = PATTERNS[PatternType.CLEAN].directories
        assert "src/backend/usecases" in directories
        assert "src/frontend/viewmodels" in directories

    def test_gitkeep_files_are_empty(self) -> None:
        assert _file(PatternType.LAYERED, "src/assets/images/.gitkeep").content == b""

    def test_vite_svg_shared(self) -> None:
        contents = {_file(p, "public/vite.svg").content for p in PatternType}
        assert len(contents) == 1
        assert contents.pop().startswith(b"<svg ")

    def test_description_mentions_every_pattern(self) -> None:
        for pattern in PATTERNS.values():
            assert pattern.label.split(" (")[0] in ARCHITECTURE_DESCRIPTION


class TestLookup:
    """Key parsing and lookup."""

    def test_parse_string(self) -> None:
        assert parse_pattern_type("feature") is PatternType.FEATURE

    def test_parse_enum_passthrough(self) -> None:
        assert parse_pattern_type(PatternType.ATOMIC) is PatternType.ATOMIC

    @pytest.mark.parametrize("raw", ["hexagonal", "", "Layered", None, 3])
    def test_parse_rejects(self, raw: object) -> None:
        with pytest.raises(UnknownPatternError) as exc_info:
            parse_pattern_type(raw)
        assert "layered, feature, atomic, clean" in exc_info.value.message
        assert exc_info.value.field == "pattern_type"

    def test_get_pattern(self) -> None:
        assert get_pattern("clean") is PATTERNS[PatternType.CLEAN]


class TestValidateCatalog:
    """Invariant checks over custom catalogs."""

    def test_flags_bad_paths(self) -> None:
        bad = PatternDefinition(
            label="Bad",
            directories=("/abs", "a/../b", ""),
            files=(
                FileSpec(path="ok.txt", content=b""),
                FileSpec(path="ok.txt", content=b""),
                FileSpec(path="C:/win.txt", content=b""),
                FileSpec(path="back\\slash.txt", content=b""),
            ),
        )

        problems = validate_catalog({PatternType.LAYERED: bad})

        assert "layered: directory path '/abs' is not relative" in problems
        assert "layered: directory path 'a/../b' contains '..'" in problems
        assert "layered: directory path is empty" in problems
        assert "layered: duplicate file path 'ok.txt'" in problems
        assert "layered: file path 'C:/win.txt' is not relative" in problems
        assert "layered: file path 'back\\slash.txt' is not relative" in problems
