import io
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from typewriter.core.fragments import FragmentResolver
from typewriter.core.languages import normalize_language
from typewriter.core.parse import parse_directory, parse_file
from typewriter.core.render import render, render_header, render_raw
from typewriter.errors import UnsupportedLanguageError
from typewriter.models import PackageType

logger = logging.getLogger(__name__)


def generate(
    types: Iterable[PackageType],
    language: str,
    out: TextIO,
    fragments: FragmentResolver | None = None,
) -> None:
    """Write the header and every type, sorted by name, each followed by a blank line."""
    fragments = fragments or FragmentResolver()
    render_header(language, out, fragments)
    for package_type in sorted(types, key=lambda t: t.name):
        logger.debug("Rendering %s for %s", package_type.name, language)
        render(package_type, language, out, fragments)
        render_raw("\n\n", out)


def resolve_language(language: str, fragments: FragmentResolver) -> str:
    resolved = normalize_language(language)
    available = fragments.languages()
    if resolved not in available:
        raise UnsupportedLanguageError(f"Unsupported language '{language}'. Supported: {available}")
    return resolved


def load_types(source: str | Path, recursive: bool = False) -> list[PackageType]:
    source_path = Path(source)
    if source_path.is_dir():
        return parse_directory(source_path, recursive=recursive)
    return parse_file(source_path)


def generate_source(
    source: str | Path,
    language: str,
    recursive: bool = False,
    fragments: FragmentResolver | None = None,
) -> str:
    """Parse a Go file or directory and return the rendered declarations."""
    fragments = fragments or FragmentResolver()
    resolved_language = resolve_language(language, fragments)
    types = load_types(source, recursive=recursive)
    buffer = io.StringIO()
    generate(types, resolved_language, buffer, fragments)
    return buffer.getvalue()


def generate_file(
    source: str | Path,
    language: str,
    output: str | Path,
    recursive: bool = False,
    fragments: FragmentResolver | None = None,
) -> Path:
    """Render ``source`` and write it to ``output``. Nothing is written on failure."""
    rendered = generate_source(source, language, recursive=recursive, fragments=fragments)
    out = Path(output)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(rendered, encoding="utf-8", newline="\n")
    logger.info("Wrote %s", out)
    return out
