"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

from typewriter.core.fragments import FragmentResolver

_REPO_ROOT = Path(__file__).parent.parent

# Every fragment writes a marker so tests can assert on the exact order.
MARKER_FRAGMENTS = {
    "header": "<header>",
    "declaration": "<declaration:{{ name }}>",
    "basic": "{% if pointer %}*{% endif %}{{ type }}",
    "map_key": "<map_key>",
    "map_value": "<map_value>",
    "map_close": "<map_close>",
    "array_open": "<array_open>",
    "array_close": "<array_close>",
    "struct_open": "<struct_open{% if strict %}:strict{% endif %}>",
    "struct_close": "<struct_close>",
    "field_name": "<field:{{ name }}>",
    "field_close": "<field_close>",
    "comment": "<comment:{{ comment }}>",
}


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def templates_dir() -> Path:
    """Return the path to the bundled templates directory."""
    return _REPO_ROOT / "src" / "typewriter" / "templates"


@pytest.fixture
def write_fragments(tmp_path: Path) -> Callable[..., FragmentResolver]:
    """Return a factory writing a fragment set for a language under a temporary root."""
    root = tmp_path / "templates"

    def _write(language: str = "test", fragments: dict[str, str] | None = None) -> FragmentResolver:
        directory = root / language
        directory.mkdir(parents=True, exist_ok=True)
        for name, text in (MARKER_FRAGMENTS if fragments is None else fragments).items():
            (directory / f"{name}.tmpl").write_text(text, encoding="utf-8")
        return FragmentResolver(root)

    return _write


@pytest.fixture
def marker_fragments(write_fragments: Callable[..., FragmentResolver]) -> FragmentResolver:
    """Return a resolver for the marker fragment set under the language ``test``."""
    return write_fragments()


@pytest.fixture
def go_parser() -> Parser:
    """Return a tree-sitter parser for Go."""
    return get_parser("go")


@pytest.fixture
def marker_texts() -> dict[str, str]:
    """Return the texts of the marker fragment set."""
    return dict(MARKER_FRAGMENTS)
