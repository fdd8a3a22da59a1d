from typewriter.core.fragments import FRAGMENT_NAMES, FragmentResolver
from typewriter.core.generate import generate
from typewriter.core.render import render, render_header, render_raw
from typewriter.core.tags import get_tag
from typewriter.errors import (
    FragmentNotFoundError,
    FragmentParseError,
    FragmentRenderError,
    MissingTypeError,
    RawFragmentParseError,
    TagBooleanParseError,
    TypewriterError,
)
from typewriter.models import Array, Basic, Field, Map, PackageType, Struct, TypeNode

__all__ = [
    "FRAGMENT_NAMES",
    "Array",
    "Basic",
    "Field",
    "FragmentNotFoundError",
    "FragmentParseError",
    "FragmentRenderError",
    "FragmentResolver",
    "Map",
    "MissingTypeError",
    "PackageType",
    "RawFragmentParseError",
    "Struct",
    "TagBooleanParseError",
    "TypeNode",
    "TypewriterError",
    "generate",
    "get_tag",
    "render",
    "render_header",
    "render_raw",
]
