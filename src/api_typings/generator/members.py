"""Member classification: inline expansion and binding partition."""

from typing import NamedTuple

from api_typings.errors import CyclicType, DuplicateMember, UnsupportedType
from api_typings.parser.base import Binding, DefineStruct, Member, NestedStruct, PointerType, Type, type_name

PARAM_BINDINGS = (Binding.PATH, Binding.FORM)


class Classification(NamedTuple):
    """Flattened members of a composite, split by where they travel."""

    body: list[Member]
    non_body: list[Member]  # path, form and header
    params: list[Member]  # path and form
    headers: list[Member]


def flatten_members(tp: Type, owner: str, chain: tuple = ()) -> list[Member]:
    """Expand inline members depth-first, left to right.

    ``tp`` must be a struct or a pointer to one. ``chain`` holds the
    structs currently being expanded.
    """
    struct = _struct_of(tp, owner)
    if any(seen is struct for seen in chain):
        names = [_label(s) for s in chain] + [_label(struct)]
        raise CyclicType(names, owner)
    chain = (*chain, struct)

    members = []
    for member in struct.members:
        if member.inline:
            members.extend(flatten_members(member.type, owner, chain))
        else:
            members.append(member)
    return members


def classify(tp: Type, owner: str, chain: tuple = ()) -> Classification:
    """Partition a composite's flattened members by binding.

    ``chain`` holds the enclosing structs already being rendered.
    """
    members = flatten_members(tp, owner, chain)
    body = [m for m in members if m.binding is Binding.BODY]
    non_body = [m for m in members if m.binding is not Binding.BODY]
    params = [m for m in non_body if m.binding in PARAM_BINDINGS]
    headers = [m for m in non_body if m.binding is Binding.HEADER]

    for group in (body, params, headers):
        _check_unique(group, owner)
    return Classification(body, non_body, params, headers)


def _struct_of(tp: Type, owner: str) -> DefineStruct | NestedStruct:
    match tp:
        case DefineStruct() | NestedStruct():
            return tp
        case PointerType(type=DefineStruct() | NestedStruct() as inner):
            return inner
    raise UnsupportedType(type_name(tp), owner)


def _check_unique(members: list[Member], owner: str) -> None:
    seen = set()
    for m in members:
        if m.name in seen:
            raise DuplicateMember(m.name, owner)
        seen.add(m.name)


def _label(struct: DefineStruct | NestedStruct) -> str:
    return struct.name if isinstance(struct, DefineStruct) else "struct{...}"
