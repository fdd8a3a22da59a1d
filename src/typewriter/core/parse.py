"""Build type trees from Go ``type`` declarations.

Uses the tree-sitter Go grammar. Doc comments directly above a declaration
become the type's comment; a comment line reading ``@strict`` marks a struct
as strict. Trailing same-line comments on struct fields become field comments.
"""

import logging
from pathlib import Path

from tree_sitter import Node
from tree_sitter_language_pack import get_parser

from typewriter.core.tags import get_tag
from typewriter.errors import SourceParseError
from typewriter.models import Array, Basic, Field, Map, PackageType, Struct, TypeNode

logger = logging.getLogger(__name__)

_SPEC_TYPES = ("type_spec", "type_alias")
_STRICT_MARKER = "@strict"


def parse_source(source: bytes, origin: str = "<source>") -> list[PackageType]:
    """Return every package-level type declared in ``source``."""
    try:
        source.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SourceParseError(f"{origin} is not valid UTF-8: {exc}") from exc
    tree = get_parser("go").parse(source)
    root = tree.root_node
    if root.has_error:
        raise SourceParseError(f"Go syntax error in {origin}")

    types: list[PackageType] = []
    for declaration in root.named_children:
        if declaration.type != "type_declaration":
            continue
        grouped = any(child.type == "(" for child in declaration.children)
        for spec in declaration.named_children:
            if spec.type not in _SPEC_TYPES:
                continue
            # Ungrouped specs are documented by the comment above the `type` keyword.
            documented = spec if grouped else declaration
            types.append(_package_type(spec, _leading_comment(documented, source), source))
    logger.debug("Parsed %d type(s) from %s", len(types), origin)
    return types


def parse_file(path: str | Path) -> list[PackageType]:
    file_path = Path(path)
    try:
        source = file_path.read_bytes()
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None
    return parse_source(source, str(file_path))


def parse_directory(path: str | Path, recursive: bool = False) -> list[PackageType]:
    """Parse all non-test ``.go`` files in a directory, in path order."""
    directory = Path(path)
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {path}")
    files = sorted(directory.rglob("*.go") if recursive else directory.glob("*.go"))
    types: list[PackageType] = []
    for file_path in files:
        if file_path.name.endswith("_test.go"):
            continue
        logger.info("Parsing %s", file_path)
        types.extend(parse_file(file_path))
    return types


def _text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8")


def _comment_text(node: Node, source: bytes) -> str:
    text = _text(node, source)
    if text.startswith("//"):
        text = text[2:]
        return text[1:] if text.startswith(" ") else text
    return "\n".join(line.strip().lstrip("*").strip() for line in text[2:-2].strip().splitlines())


def _leading_comment(node: Node, source: bytes) -> str:
    lines: list[str] = []
    row = node.start_point[0]
    sibling = node.prev_named_sibling
    while sibling is not None and sibling.type == "comment" and sibling.end_point[0] == row - 1:
        if _ends_line(sibling):
            break
        lines.append(_comment_text(sibling, source))
        row = sibling.start_point[0]
        sibling = sibling.prev_named_sibling
    return "\n".join(reversed(lines))


def _ends_line(comment: Node) -> bool:
    previous = comment.prev_sibling
    return previous is not None and previous.end_point[0] == comment.start_point[0]


def _trailing_comment(node: Node, source: bytes) -> str:
    candidates = [node.next_named_sibling]
    if node.named_children:
        candidates.append(node.named_children[-1])
    for candidate in candidates:
        if candidate is not None and candidate.type == "comment" and candidate.start_point[0] == node.end_point[0]:
            # Field comments are rendered on the field's own line.
            return " ".join(line for line in _comment_text(candidate, source).splitlines() if line)
    return ""


def _package_type(spec: Node, comment: str, source: bytes) -> PackageType:
    name = _text(spec.child_by_field_name("name"), source)
    type_node = _convert(spec.child_by_field_name("type"), source)
    if isinstance(type_node, Struct) and _STRICT_MARKER in (line.strip() for line in comment.splitlines()):
        type_node = type_node.model_copy(update={"strict": True})
    return PackageType(name=name, comment=comment, type=type_node)


def _convert(node: Node, source: bytes) -> TypeNode:
    kind = node.type
    if kind == "pointer_type":
        inner = _convert(node.named_children[0], source)
        if isinstance(inner, Basic):
            return inner.model_copy(update={"pointer": True})
        return inner
    if kind == "parenthesized_type":
        return _convert(node.named_children[0], source)
    if kind in ("slice_type", "array_type"):
        element = node.child_by_field_name("element")
        if _text(element, source) == "byte":
            return Basic(type="[]byte")
        return Array(type=_convert(element, source))
    if kind == "map_type":
        return Map(
            key=_convert(node.child_by_field_name("key"), source),
            value=_convert(node.child_by_field_name("value"), source),
        )
    if kind == "struct_type":
        return _struct(node, source)
    if kind == "interface_type":
        return Basic(type="interface{}")
    return Basic(type=_text(node, source))


def _struct(node: Node, source: bytes) -> Struct:
    fields: list[Field] = []
    embedded: list[str] = []
    declarations = next((child for child in node.named_children if child.type == "field_declaration_list"), None)
    if declarations is None:
        return Struct()

    for declaration in declarations.named_children:
        if declaration.type != "field_declaration":
            continue
        type_node = declaration.child_by_field_name("type")
        tag_node = declaration.child_by_field_name("tag")
        tag = _tag_text(tag_node, source) if tag_node is not None else ""
        if get_tag("json", tag) == "-":
            continue
        names = declaration.children_by_field_name("name")
        if not names:
            embedded.append(_embedded_name(type_node, source))
            continue
        comment = _trailing_comment(declaration, source)
        for name in names:
            fields.append(
                Field(
                    name=_text(name, source),
                    type=_convert(type_node, source),
                    comment=comment,
                    tag=tag,
                )
            )
    return Struct(fields=fields, embedded=embedded)


def _embedded_name(node: Node, source: bytes) -> str:
    if node.type == "qualified_type":
        return _text(node.child_by_field_name("name"), source)
    if node.type == "generic_type":
        return _text(node.child_by_field_name("type"), source)
    return _text(node, source).lstrip("*")


def _tag_text(node: Node, source: bytes) -> str:
    text = _text(node, source)
    if text.startswith("`"):
        return text[1:-1]
    return text[1:-1].replace('\\"', '"')
