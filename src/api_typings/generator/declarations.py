"""Declaration assembler: one interface block per composite, plus companions."""

import io

from api_typings.errors import MissingMembers, NameCollision
from api_typings.generator.members import Classification, classify
from api_typings.generator.render import title, write_indent, write_members
from api_typings.parser.base import DefineStruct, Member


def build_types(types: list[DefineStruct], indent: int = 1) -> str:
    """Render all composites in input order, blocks separated by a blank line.

    Any failure aborts the whole batch; nothing is returned partially.
    """
    emitted: dict[str, str] = {}
    blocks = []
    for tp in types:
        for name, block in declaration_blocks(tp, indent):
            if name in emitted:
                raise NameCollision(name, emitted[name], tp.name)
            emitted[name] = tp.name
            blocks.append(block)
    return "\n\n".join(blocks)


def declaration_blocks(tp: DefineStruct, indent: int = 0) -> list[tuple[str, str]]:
    """Return ``(interface name, text)`` for the composite and its companions."""
    classification = classify(tp, tp.name)
    name = title(tp.name)

    writer = io.StringIO()
    for line in tp.docs:
        write_indent(writer, indent)
        writer.write(f"{line}\n")
    _write_interface(writer, name, classification.body, tp, indent)
    blocks = [(name, writer.getvalue())]

    if classification.non_body:
        blocks.extend(companion_blocks(tp, classification, indent))
    return blocks


def companion_blocks(tp: DefineStruct, classification: Classification, indent: int = 0) -> list[tuple[str, str]]:
    """Render ``<Name>Params`` and, when header members exist, ``<Name>Headers``."""
    if not classification.non_body:
        raise MissingMembers(tp.name)

    name = title(tp.name)
    blocks = [_interface(f"{name}Params", classification.params, tp, indent)]
    if classification.headers:
        blocks.append(_interface(f"{name}Headers", classification.headers, tp, indent))
    return blocks


def _interface(name: str, members: list[Member], owner: DefineStruct, indent: int) -> tuple[str, str]:
    writer = io.StringIO()
    _write_interface(writer, name, members, owner, indent)
    return name, writer.getvalue()


def _write_interface(writer, name: str, members: list[Member], owner: DefineStruct, indent: int) -> None:
    write_indent(writer, indent)
    writer.write(f"export interface {name} {{\n")
    write_members(writer, members, owner.name, indent + 1, (owner,))
    write_indent(writer, indent)
    writer.write("}")
