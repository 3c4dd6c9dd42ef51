"""CLI entry point for api-typings."""

from pathlib import Path

import click

from api_typings.errors import TypingsError
from api_typings.generator.declarations import build_types
from api_typings.generator.sink import TOOL_NAME, render_file, write_typings
from api_typings.parser.document import load_document

DEFAULT_FILENAME = "typings.d.ts"


@click.group()
@click.version_option(package_name="api-typings", prog_name=TOOL_NAME)
def main():
    """api-typings — generate TypeScript declarations from API type descriptions."""
    pass


@main.command()
@click.argument("api_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-d", "--dir", "out_dir", default=".", type=click.Path(file_okay=False, path_type=Path), help="Output directory.")
@click.option("--filename", default=DEFAULT_FILENAME, help="Save file name.")
def typings(api_file: Path, out_dir: Path, filename: str):
    """Generate typings.d.ts from an API description."""
    filename = filename or DEFAULT_FILENAME

    click.echo(f"Parsing {api_file}...")
    try:
        spec = load_document(api_file)
        click.echo(f"Found {len(spec.types)} types.")
        if not spec.types:
            click.echo("Nothing to generate.")
            return
        body = build_types(spec.types)
    except TypingsError as e:
        raise click.ClickException(str(e)) from e

    target = out_dir / filename
    try:
        created = write_typings(target, render_file(body, spec.version))
    except OSError as e:
        raise click.ClickException(f"cannot write {target}: {e}") from e
    if not created:
        click.echo(f"File already exists: {target}")
        return
    click.echo(f"Typings saved to {target}")
