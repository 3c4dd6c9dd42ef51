"""Errors raised while loading an API description or generating typings."""


class TypingsError(Exception):
    """Base class for all api-typings failures."""


class UnsupportedType(TypingsError):
    """A type kind or shape that has no TypeScript rendering at its position."""

    def __init__(self, kind: str, owner: str | None = None):
        self.kind = kind
        self.owner = owner
        if owner:
            super().__init__(f"type {kind} not supported in {owner}")
        else:
            super().__init__(f"unsupported type {kind}")


class CyclicType(UnsupportedType):
    """Inline members reference back into a composite already being expanded."""

    def __init__(self, chain: list[str], owner: str | None = None):
        self.chain = chain
        super().__init__(f"cyclic inline {' -> '.join(chain)}", owner)


class MissingMembers(TypingsError):
    """A companion declaration was requested for an empty member set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no members of type {name}")


class DuplicateMember(TypingsError):
    """Two members share a property name after inline flattening."""

    def __init__(self, member: str, owner: str):
        self.member = member
        self.owner = owner
        super().__init__(f"duplicate member {member} in {owner}")


class NameCollision(TypingsError):
    """Two composites map to the same interface name after capitalization."""

    def __init__(self, interface: str, first: str, second: str):
        self.interface = interface
        super().__init__(f"types {first} and {second} both generate interface {interface}")


class FileConflict(TypingsError):
    """The output path is already occupied."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"file already exists: {path}")


class DocumentError(TypingsError):
    """The API description file is malformed or references unknown types."""
