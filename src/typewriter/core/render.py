"""Recursive rendering of type trees through per-language fragments.

Each node variant writes its fragments in a fixed order, recursing into its
children depth-first and left to right. The first error aborts the render;
whatever was already written to ``out`` stays there.
"""

import logging
from functools import singledispatch
from typing import Any, TextIO

from jinja2 import Environment, StrictUndefined, TemplateError, TemplateSyntaxError

from typewriter.core.fragments import FragmentResolver
from typewriter.core.tags import display_name, type_override
from typewriter.errors import FragmentRenderError, MissingTypeError, RawFragmentParseError
from typewriter.models import Array, Basic, Field, Map, PackageType, Struct

logger = logging.getLogger(__name__)

_RAW_ENV = Environment(undefined=StrictUndefined, autoescape=False, keep_trailing_newline=True)

Node = Basic | Map | Array | Struct | Field | PackageType


def render(node: Node, language: str, out: TextIO, fragments: FragmentResolver | None = None) -> None:
    """Render ``node`` for ``language`` into ``out``."""
    render_node(node, out, language, fragments or FragmentResolver())


def render_header(language: str, out: TextIO, fragments: FragmentResolver | None = None) -> None:
    """Write the file prologue of ``language``."""
    _write(out, fragments or FragmentResolver(), language, "header")


def render_raw(raw: str, out: TextIO) -> None:
    """Compile literal template text and write it with no context."""
    try:
        template = _RAW_ENV.from_string(raw)
    except TemplateSyntaxError as exc:
        raise RawFragmentParseError(f"Invalid raw template {raw!r}: {exc}") from exc
    try:
        out.write(template.render())
    except TemplateError as exc:
        raise FragmentRenderError("raw", str(exc)) from exc


def effective_field(field: Field) -> Field:
    """Return a copy of ``field`` with its ``json`` name and ``tw`` type applied."""
    update: dict[str, Any] = {}
    name = display_name(field.tag)
    if name:
        update["name"] = name
    override = type_override(field.tag, name or field.name)
    if override is not None:
        update["type"] = override
    return field.model_copy(update=update) if update else field


def _context(node: Node) -> dict[str, Any]:
    return dict(node)


def _write(
    out: TextIO,
    fragments: FragmentResolver,
    language: str,
    name: str,
    node: Node | None = None,
) -> None:
    template = fragments.resolve(language, name)
    try:
        text = template.render(_context(node) if node is not None else {})
    except TemplateError as exc:
        raise FragmentRenderError(name, str(exc)) from exc
    out.write(text)


@singledispatch
def render_node(node: Any, out: TextIO, language: str, fragments: FragmentResolver) -> None:
    raise TypeError(f"Cannot render {type(node).__name__}")


@render_node.register
def _render_basic(node: Basic, out: TextIO, language: str, fragments: FragmentResolver) -> None:
    _write(out, fragments, language, "basic", node)


@render_node.register
def _render_map(node: Map, out: TextIO, language: str, fragments: FragmentResolver) -> None:
    _write(out, fragments, language, "map_key", node)
    render_node(node.key, out, language, fragments)
    _write(out, fragments, language, "map_value", node)
    render_node(node.value, out, language, fragments)
    _write(out, fragments, language, "map_close", node)


@render_node.register
def _render_array(node: Array, out: TextIO, language: str, fragments: FragmentResolver) -> None:
    _write(out, fragments, language, "array_open", node)
    render_node(node.type, out, language, fragments)
    _write(out, fragments, language, "array_close", node)


@render_node.register
def _render_struct(node: Struct, out: TextIO, language: str, fragments: FragmentResolver) -> None:
    _write(out, fragments, language, "struct_open", node)
    last = len(node.fields) - 1
    for i, field in enumerate(node.fields):
        effective = effective_field(field)
        _render_effective_field(effective, out, language, fragments)
        if i < last:
            _write(out, fragments, language, "field_close")
            _write(out, fragments, language, "comment", effective)
        else:
            _write(out, fragments, language, "comment", effective)
            render_raw("\n", out)
    _write(out, fragments, language, "struct_close", node)


@render_node.register
def _render_field(node: Field, out: TextIO, language: str, fragments: FragmentResolver) -> None:
    _render_effective_field(effective_field(node), out, language, fragments)


def _render_effective_field(field: Field, out: TextIO, language: str, fragments: FragmentResolver) -> None:
    _write(out, fragments, language, "field_name", field)
    if field.type is None:
        logger.error("Type not set on field %s", field.name)
        raise MissingTypeError(field.name)
    render_node(field.type, out, language, fragments)


@render_node.register
def _render_package_type(node: PackageType, out: TextIO, language: str, fragments: FragmentResolver) -> None:
    _write(out, fragments, language, "declaration", node)
    if node.type is None:
        logger.error("Type not stored in package level type declaration %s", node.name)
        raise MissingTypeError(node.name)
    render_node(node.type, out, language, fragments)
