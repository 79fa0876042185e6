"""Tests for scaffold request schema validation."""

from __future__ import annotations

import pytest

from react_scaffolder.core.errors import RequestValidationError, UnknownPatternError
from react_scaffolder.patterns.types import PatternType
from react_scaffolder.validators.request import ScaffoldRequest, validate_scaffold_request


class TestValidRequests:
    """Well-formed requests pass through unchanged."""

    def test_minimal(self) -> None:
        request = validate_scaffold_request({"path": "my-app", "pattern_type": "feature"})
        assert request == ScaffoldRequest(
            target_path="my-app", pattern_type=PatternType.FEATURE
        )

    def test_path_is_not_resolved_here(self) -> None:
        """Escapes are the path guard's job, not the schema's."""
        request = validate_scaffold_request({"path": "../x", "pattern_type": "clean"})
        assert request.target_path == "../x"


class TestInvalidRequests:
    """Schema violations raise RequestValidationError naming the field."""

    @pytest.mark.parametrize(
        ("arguments", "field"),
        [
            ({"pattern_type": "layered"}, "path"),
            ({"path": None, "pattern_type": "layered"}, "path"),
            ({"path": "", "pattern_type": "layered"}, "path"),
            ({"path": "a\x00b", "pattern_type": "layered"}, "path"),
            ({"path": 42, "pattern_type": "layered"}, "path"),
            ({"path": "x"}, "pattern_type"),
            ({"path": "x", "pattern_type": ["layered"]}, "pattern_type"),
            ({"path": "x", "pattern_type": "layered", "force": True}, "force"),
        ],
    )
    def test_rejected(self, arguments: dict[str, object], field: str) -> None:
        with pytest.raises(RequestValidationError) as exc_info:
            validate_scaffold_request(arguments)
        assert exc_info.value.field == field

    def test_none_arguments(self) -> None:
        with pytest.raises(RequestValidationError) as exc_info:
            validate_scaffold_request(None)
        assert exc_info.value.field == "path"

    def test_non_mapping(self) -> None:
        with pytest.raises(RequestValidationError):
            validate_scaffold_request(["path", "x"])  # type: ignore[arg-type]

    def test_unknown_pattern(self) -> None:
        with pytest.raises(UnknownPatternError) as exc_info:
            validate_scaffold_request({"path": "x", "pattern_type": "hexagonal"})
        assert "Unknown pattern_type 'hexagonal'" in exc_info.value.message

    def test_unexpected_field_message(self) -> None:
        with pytest.raises(RequestValidationError) as exc_info:
            validate_scaffold_request(
                {"path": "x", "pattern_type": "atomic", "b": 1, "a": 2}
            )
        assert exc_info.value.message == "Unexpected field(s): a, b"
