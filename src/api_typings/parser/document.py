"""API description loader.

Parses a YAML (or JSON) API description into the ApiSpec type graph.
Field types are written as Go type expressions (``[]User``,
``map[string]int64``, ``*Page``) and field bindings come from Go-style
struct tags (``json:"id" path:"id" form:"page" header:"X-Token"``).
"""

import re
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from api_typings.errors import DocumentError
from api_typings.parser.base import (
    PRIMITIVE_KINDS,
    ApiSpec,
    ArrayType,
    Binding,
    DefineStruct,
    InterfaceType,
    MapType,
    Member,
    NestedStruct,
    PointerType,
    PrimitiveType,
    Type,
)

TAG_PATTERN = re.compile(r'(\w+):"([^"]*)"')
OPTIONS_PATTERN = re.compile(r"options=(\[[^\]]*\]|[^,]*)")

# Checked in order; a field without any of these tags travels in the body.
BINDING_TAG_KEYS = {
    "path": Binding.PATH,
    "form": Binding.FORM,
    "header": Binding.HEADER,
}


class NestedDef(BaseModel):
    """An anonymous struct written inline in a field's ``type``."""

    prefix: str = ""  # type expression wrapping the struct, e.g. "[]" or "*"
    fields: list["FieldDef"] = []


class FieldDef(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    type: Union[str, NestedDef]
    tag: str = ""
    binding: str | None = Field(default=None, alias="in")
    inline: bool = False
    docs: list[str] = []
    comment: str = ""
    options: list[str] | None = None

    @field_validator("options", mode="before")
    @classmethod
    def _stringify_options(cls, value):
        if value is None:
            return None
        return [_literal_text(v) for v in value]


class TypeDef(BaseModel):
    name: str
    docs: list[str] = []
    fields: list[FieldDef] = []


class ApiInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    version: str = ""

    @field_validator("version", mode="before")
    @classmethod
    def _stringify_version(cls, value):
        return "" if value is None else str(value)


class ApiDocument(BaseModel):
    """Raw shape of an API description file."""

    info: ApiInfo = ApiInfo()
    types: list[TypeDef] = []


for _model in (NestedDef, FieldDef, TypeDef, ApiDocument):
    _model.model_rebuild()


def load_document(file_path: Path) -> ApiSpec:
    """Parse an API description file into an ApiSpec."""
    text = file_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentError(f"{file_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DocumentError(f"{file_path}: expected a mapping at the top level")

    try:
        doc = ApiDocument.model_validate(data)
    except ValidationError as e:
        raise DocumentError(f"{file_path}: {e}") from e

    return build_spec(doc)


def build_spec(doc: ApiDocument) -> ApiSpec:
    """Resolve type names and tags into the type graph, preserving order."""
    structs: dict[str, DefineStruct] = {}
    for td in doc.types:
        if td.name in structs:
            raise DocumentError(f"duplicate type {td.name}")
        structs[td.name] = DefineStruct(name=td.name, docs=td.docs)

    # Members are attached once every type name is registered.
    for td in doc.types:
        structs[td.name].members = _build_members(td.fields, structs, td.name)

    return ApiSpec(version=doc.info.version, types=[structs[td.name] for td in doc.types])


def _build_members(fields: list[FieldDef], structs: dict[str, DefineStruct], owner: str) -> list[Member]:
    return [_build_member(f, structs, owner) for f in fields]


def _build_member(f: FieldDef, structs: dict[str, DefineStruct], owner: str) -> Member:
    label = f.name or (f.type if isinstance(f.type, str) else "struct{...}")
    tp = _field_type(f.type, structs, owner, label)
    tags = parse_tag(f.tag)
    binding = _binding(f, tags, owner, label)
    inline = f.inline or not f.name
    options = f.options if f.options is not None else _tag_options(tags)

    return Member(
        name=label if inline else _property_name(f.name, tags, binding),
        type=tp,
        binding=binding,
        inline=inline,
        docs=f.docs,
        comment=f.comment,
        options=options or None,
    )


def _field_type(value: Union[str, NestedDef], structs: dict[str, DefineStruct], owner: str, label: str) -> Type:
    if isinstance(value, NestedDef):
        inner = NestedStruct(members=_build_members(value.fields, structs, owner))
    try:
        if isinstance(value, str):
            return parse_type_expr(value, structs)
        return _wrap(value.prefix, inner, structs)
    except DocumentError as e:
        raise DocumentError(f"type {owner} field {label}: {e}") from None


def _wrap(prefix: str, inner: Type, structs: dict[str, DefineStruct]) -> Type:
    """Apply a type-expression prefix such as ``[]*`` around an inner type."""
    prefix = prefix.strip()
    if not prefix:
        return inner
    if prefix.startswith("*"):
        return PointerType(type=_wrap(prefix[1:], inner, structs))
    if prefix.startswith("[]"):
        return ArrayType(value=_wrap(prefix[2:], inner, structs))
    if prefix.startswith("map["):
        key, rest = _split_map(prefix)
        return MapType(key=parse_type_expr(key, structs), value=_wrap(rest, inner, structs))
    raise DocumentError(f"invalid type prefix {prefix!r}")


def parse_type_expr(expr: str, structs: dict[str, DefineStruct]) -> Type:
    """Parse a Go type expression against the declared struct names."""
    expr = expr.strip()
    if expr in ("interface{}", "any"):
        return InterfaceType()
    if expr.startswith("*"):
        return PointerType(type=parse_type_expr(expr[1:], structs))
    if expr.startswith("[]"):
        return ArrayType(value=parse_type_expr(expr[2:], structs))
    if expr.startswith("map["):
        key, value = _split_map(expr)
        return MapType(key=parse_type_expr(key, structs), value=parse_type_expr(value, structs))
    if expr in PRIMITIVE_KINDS:
        return PrimitiveType(name=expr)
    if expr in structs:
        return structs[expr]
    raise DocumentError(f"unknown type {expr!r}")


def _split_map(expr: str) -> tuple[str, str]:
    """Split ``map[K]V`` into ``(K, V)``."""
    depth = 0
    for i in range(3, len(expr)):
        if expr[i] == "[":
            depth += 1
        elif expr[i] == "]":
            depth -= 1
            if depth == 0:
                return expr[4:i], expr[i + 1:]
    raise DocumentError(f"unbalanced map type {expr!r}")


def parse_tag(tag: str) -> dict[str, str]:
    """Parse a Go struct tag into ``{key: value}``."""
    return dict(TAG_PATTERN.findall(tag))


def _binding(f: FieldDef, tags: dict[str, str], owner: str, label: str) -> Binding:
    if f.binding is not None:
        try:
            return Binding(f.binding.lower())
        except ValueError:
            raise DocumentError(f"type {owner} field {label}: unknown binding {f.binding!r}") from None
    for key, binding in BINDING_TAG_KEYS.items():
        if key in tags:
            return binding
    return Binding.BODY


def _property_name(name: str, tags: dict[str, str], binding: Binding) -> str:
    key = "json" if binding is Binding.BODY else binding.value
    value = tags.get(key) or tags.get("json", "")
    tag_name = value.split(",")[0].strip()
    if tag_name and tag_name != "-":
        return tag_name
    return name


def _tag_options(tags: dict[str, str]) -> list[str] | None:
    for value in tags.values():
        match = OPTIONS_PATTERN.search(value)
        if not match:
            continue
        raw = match.group(1)
        if raw.startswith("["):
            return [o.strip() for o in raw[1:-1].split(",") if o.strip()]
        return [o.strip() for o in raw.split("|") if o.strip()]
    return None


def _literal_text(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
