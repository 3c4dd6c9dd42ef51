"""Wraps generated declarations in the file template and writes them out."""

from pathlib import Path

from api_typings.errors import FileConflict

TOOL_NAME = "api-typings"

FILE_TEMPLATE = """// Code generated by {tool}. DO NOT EDIT.
// {tool} {version}

declare namespace API {{
{body}
}}

export {{ API }};
"""


def render_file(body: str, version: str, tool: str = TOOL_NAME) -> str:
    return FILE_TEMPLATE.format(tool=tool, version=version, body=body)


def create_file(path: Path, content: str) -> None:
    """Create ``path`` with ``content``; never overwrites an existing file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with path.open("x", encoding="utf-8") as fp:
            fp.write(content)
    except FileExistsError:
        raise FileConflict(path) from None


def write_typings(path: Path, content: str) -> bool:
    """Write the typings file. Returns False if the file already existed."""
    try:
        create_file(path, content)
    except FileConflict:
        return False
    return True
