"""Parsing of struct tag strings such as ``json:"name,omitempty" tw:"int64,true"``.

Pairs need no separator between them and quotes inside a value cannot be
escaped: a value always ends at the next double quote. When a key appears
more than once, the first pair wins.
"""

import logging
import re
from collections.abc import Iterator

from typewriter.errors import TagBooleanParseError
from typewriter.models import Basic

logger = logging.getLogger(__name__)

_PAIR = re.compile(r'([^\s:"]+):"([^"]*)"')

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def iter_tags(tags: str) -> Iterator[tuple[str, str]]:
    """Yield ``(key, value)`` pairs in the order they appear."""
    for match in _PAIR.finditer(tags):
        yield match.group(1), match.group(2)


def get_tag(key: str, tags: str) -> str:
    """Return the value stored under ``key``, or an empty string."""
    for name, value in iter_tags(tags):
        if name == key:
            return value
    return ""


def parse_bool(value: str) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise TagBooleanParseError(value)


def display_name(tags: str) -> str:
    """Return the ``json`` name of a field, or an empty string when none is set."""
    return get_tag("json", tags).split(",")[0]


def type_override(tags: str, field_name: str) -> Basic | None:
    """Build the basic type requested by a ``tw:"type[,pointer]"`` tag.

    A pointer flag that is not a boolean is logged and treated as false; the
    type override still applies.
    """
    value = get_tag("tw", tags)
    if not value:
        return None

    parts = value.split(",")
    if len(parts) > 2 or not parts[0]:
        logger.warning("Ignoring malformed tw tag %r on field %s", value, field_name)
        return None

    pointer = False
    if len(parts) == 2:
        try:
            pointer = parse_bool(parts[1])
        except TagBooleanParseError as exc:
            logger.error("Error parsing bool for type %s: %s", field_name, exc)
    return Basic(type=parts[0], pointer=pointer)
