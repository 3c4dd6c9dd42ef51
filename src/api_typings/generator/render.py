"""Type renderer — writes types and member lines as TypeScript text.

Every function takes the owning top-level composite name so failures
can point the API author at the type to fix.
"""

import io
from typing import Never, NoReturn, TextIO

from api_typings.errors import UnsupportedType
from api_typings.generator.enums import enum_literals
from api_typings.generator.members import classify
from api_typings.generator.primitive import primitive_type
from api_typings.parser.base import (
    ArrayType,
    DefineStruct,
    InterfaceType,
    MapType,
    Member,
    NestedStruct,
    PointerType,
    PrimitiveType,
    Type,
)

BYTE_KINDS = ("byte", "uint8")


def title(name: str) -> str:
    """Capitalize the first letter of a type name."""
    return name[:1].upper() + name[1:]


def write_indent(writer: TextIO, indent: int) -> None:
    writer.write("\t" * indent)


def write_type(writer: TextIO, tp: Type, owner: str, indent: int, chain: tuple = ()) -> None:
    """Write ``tp`` as a TypeScript type expression.

    ``indent`` is the indentation of the line the type appears on; nested
    object literals put their members one level deeper and close at it.
    ``chain`` holds the enclosing structs being rendered.
    """
    match tp:
        case PrimitiveType(name=kind):
            try:
                writer.write(primitive_type(kind))
            except UnsupportedType:
                raise UnsupportedType(kind, owner) from None
        case DefineStruct(name=name):
            writer.write(title(name))
        case NestedStruct():
            writer.write("{\n")
            write_members(writer, classify(tp, owner, chain).body, owner, indent + 1, (*chain, tp))
            write_indent(writer, indent)
            writer.write("}")
        case ArrayType(value=PrimitiveType(name=kind)) if kind in BYTE_KINDS:
            writer.write("Blob")
        case ArrayType(value=value):
            writer.write("Array<")
            write_type(writer, value, owner, indent, chain)
            writer.write(">")
        case MapType(value=value):
            # Object keys are strings whatever the source key kind.
            writer.write("{ [key: string]: ")
            write_type(writer, value, owner, indent, chain)
            writer.write(" }")
        case PointerType(type=referent):
            write_type(writer, referent, owner, indent, chain)
        case InterfaceType():
            writer.write("any")
        case _:
            _unsupported(tp, owner)


def render_type(tp: Type, owner: str, indent: int = 0, chain: tuple = ()) -> str:
    writer = io.StringIO()
    write_type(writer, tp, owner, indent, chain)
    return writer.getvalue()


def member_type(member: Member, owner: str, indent: int, chain: tuple = ()) -> str:
    """Render a member's type, replaced by its enum literals if it has any."""
    ty = render_type(member.type, owner, indent, chain)
    if member.options and not isinstance(member.type, NestedStruct):
        return enum_literals(member.options, ty)
    return ty


def write_member(writer: TextIO, member: Member, owner: str, indent: int, chain: tuple = ()) -> None:
    for line in member.docs:
        write_indent(writer, indent)
        writer.write(f"{line}\n")

    ty = member_type(member, owner, indent, chain)
    write_indent(writer, indent)
    # All fields are optional.
    writer.write(f"{member.name}?: {ty}{format_comment(member.comment)}\n")


def write_members(writer: TextIO, members: list[Member], owner: str, indent: int, chain: tuple = ()) -> None:
    for member in members:
        write_member(writer, member, owner, indent, chain)


def format_comment(comment: str) -> str:
    """Turn a source field comment into a trailing ``// ...`` suffix."""
    if not comment:
        return ""
    text = comment.strip().removeprefix("//").strip()
    return f" // {text}" if text else ""


def _unsupported(tp: Never, owner: str) -> NoReturn:
    raise UnsupportedType(getattr(tp, "kind", type(tp).__name__), owner)
