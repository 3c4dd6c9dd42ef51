"""Scalar kind to TypeScript type mapping."""

from api_typings.errors import UnsupportedType

PRIMITIVE_TYPES = {
    # 64-bit integers always render as string.
    "string": "string",
    "int64": "string",
    "uint64": "string",
    "int": "number",
    "int8": "number",
    "int16": "number",
    "int32": "number",
    "uint": "number",
    "uint8": "number",
    "uint16": "number",
    "uint32": "number",
    "byte": "number",
    "rune": "number",
    "float": "number",
    "float32": "number",
    "float64": "number",
    "bool": "boolean",
    "[]byte": "Blob",
    "interface{}": "any",
    "any": "any",
}


def primitive_type(kind: str) -> str:
    """Return the TypeScript type for a scalar kind tag."""
    try:
        return PRIMITIVE_TYPES[kind]
    except KeyError:
        raise UnsupportedType(kind) from None
