"""Type graph models for a parsed API description.

The document loader resolves an API description into these models;
the generator walks them read-only to produce TypeScript declarations.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

# Scalar kind tags accepted by the loader as PrimitiveType names.
PRIMITIVE_KINDS = frozenset({
    "string",
    "int", "int8", "int16", "int32", "int64",
    "uint", "uint8", "uint16", "uint32", "uint64",
    "byte", "rune",
    "float", "float32", "float64",
    "bool",
    "[]byte",
    "interface{}", "any",
})


class Binding(str, Enum):
    """Where a member travels in the HTTP request."""

    BODY = "body"
    PATH = "path"
    FORM = "form"
    HEADER = "header"

    @classmethod
    def _missing_(cls, value):
        if value == "query":
            return cls.FORM
        return None


class PrimitiveType(BaseModel):
    kind: Literal["primitive"] = "primitive"
    name: str  # string / int64 / bool / []byte / ...


class DefineStruct(BaseModel):
    """A named composite. References to it render as its interface name."""

    kind: Literal["struct"] = "struct"
    name: str
    members: list["Member"] = []
    docs: list[str] = []


class NestedStruct(BaseModel):
    """An anonymous composite rendered inline as an object literal."""

    kind: Literal["nested"] = "nested"
    members: list["Member"] = []


class ArrayType(BaseModel):
    kind: Literal["array"] = "array"
    value: "Type"


class MapType(BaseModel):
    kind: Literal["map"] = "map"
    key: "Type"
    value: "Type"


class PointerType(BaseModel):
    kind: Literal["pointer"] = "pointer"
    type: "Type"


class InterfaceType(BaseModel):
    kind: Literal["interface"] = "interface"


Type = Annotated[
    Union[PrimitiveType, DefineStruct, NestedStruct, ArrayType, MapType, PointerType, InterfaceType],
    Field(discriminator="kind"),
]


class Member(BaseModel):
    """A single field of a composite."""

    name: str  # property name as emitted
    type: Type
    binding: Binding = Binding.BODY
    inline: bool = False
    docs: list[str] = []
    comment: str = ""
    options: list[str] | None = None  # enumerated literal set


class ApiSpec(BaseModel):
    """The resolved type graph of one API description."""

    version: str = ""
    types: list[DefineStruct]


for _model in (DefineStruct, NestedStruct, ArrayType, MapType, PointerType, Member, ApiSpec):
    _model.model_rebuild()


def type_name(tp: Type) -> str:
    """Go-style spelling of a type, used in error messages."""
    match tp:
        case PrimitiveType(name=name):
            return name
        case DefineStruct(name=name):
            return name
        case NestedStruct():
            return "struct{...}"
        case ArrayType(value=value):
            return "[]" + type_name(value)
        case MapType(key=key, value=value):
            return f"map[{type_name(key)}]{type_name(value)}"
        case PointerType(type=referent):
            return "*" + type_name(referent)
        case InterfaceType():
            return "interface{}"
    return type(tp).__name__
