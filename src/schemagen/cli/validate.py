"""schemagen validate command."""

from pathlib import Path

import click

from schemagen.exceptions import SchemagenError
from schemagen.loader import load_schema
from schemagen.schema import ArrayNode, ObjectNode, SchemaNode


@click.command()
@click.argument("schema_file", type=click.Path(path_type=Path))
def validate(schema_file: Path) -> None:
    """Check that SCHEMA_FILE decodes into a usable schema."""
    try:
        node = load_schema(schema_file)
    except SchemagenError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Valid {node.kind} schema ({_count_nodes(node)} node(s))")
    if node.enum is not None:
        click.echo(f"  enum with {len(node.enum)} value(s) overrides the type")


def _count_nodes(node: SchemaNode) -> int:
    if isinstance(node, ArrayNode):
        return 1 + _count_nodes(node.items)
    if isinstance(node, ObjectNode):
        return 1 + sum(_count_nodes(child) for child in node.properties.values())
    return 1
