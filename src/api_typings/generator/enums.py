"""Enum literal unions for members with an allowed-value set."""


def enum_literals(options: list[str], base: str) -> str:
    """Join options into a TypeScript literal union.

    Literals are quoted when the member's base type renders as ``string``
    and written bare otherwise, e.g. ``'A' | 'B'`` or ``1 | 2``.
    """
    if base == "string":
        return " | ".join(_quote(o) for o in options)
    return " | ".join(options)


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"
