"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

from swift_lint.core.ast import SourceUnit, load_source_unit
from swift_lint.core.source import SourceText
from swift_lint.rules import RedundantTypeAnnotationRule

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def swift_parser() -> Parser:
    """Return a tree-sitter parser for Swift."""
    return get_parser("swift")


@pytest.fixture
def make_unit() -> Callable[[str], SourceUnit]:
    """Return a factory that parses a Swift snippet into a source unit."""

    def _make(code: str) -> SourceUnit:
        return load_source_unit(SourceText(code))

    return _make


@pytest.fixture
def rule() -> RedundantTypeAnnotationRule:
    return RedundantTypeAnnotationRule()
