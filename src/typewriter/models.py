from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Basic(_Node):
    """A basic type. Ints, strings, bools, etc. or a custom named type."""

    type: NonEmptyStr
    pointer: bool = False


class Map(_Node):
    key: "TypeNode"
    value: "TypeNode"


class Array(_Node):
    type: "TypeNode"


class Field(_Node):
    """A struct field. ``tag`` is the raw tag string, e.g. ``json:"name"``."""

    name: str
    type: "TypeNode | None" = None
    comment: str = ""
    tag: str = ""


class Struct(_Node):
    fields: list[Field] = []

    # Strict is only honoured by Flow fragments.
    strict: bool = False

    # Names of the types embedded in the struct
    embedded: list[str] = []


class PackageType(_Node):
    """A package-level type, rendered as a full declaration with its comment."""

    name: str
    comment: str = ""
    type: "TypeNode | None" = None
    tag: str = ""


TypeNode = Basic | Map | Array | Struct

# necessary for recursive types
Map.model_rebuild()
Array.model_rebuild()
Field.model_rebuild()
Struct.model_rebuild()
PackageType.model_rebuild()
