"""schemagen generate command."""

import json
from pathlib import Path
from typing import Any

import click
import structlog

from schemagen.config import GeneratorSettings
from schemagen.exceptions import SchemagenError
from schemagen.generator import Generator
from schemagen.loader import load_schema

logger = structlog.get_logger(__name__)


@click.command()
@click.argument("schema_file", type=click.Path(path_type=Path))
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
@click.option(
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of documents; more than one prints a JSON array.",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="JSON indentation (0 for compact output).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of stdout.",
)
@click.option(
    "--optional-probability",
    type=click.FloatRange(0.0, 1.0),
    default=None,
    help="Chance that a non-required property is included.",
)
@click.option(
    "--max-unique-attempts",
    type=click.IntRange(min=0),
    default=None,
    help="Consecutive duplicate draws allowed for uniqueItems (0 = no limit).",
)
@click.option(
    "--unique-attempts-per-item",
    type=click.IntRange(min=0),
    default=None,
    help="Raise the duplicate-draw limit to this many per requested item.",
)
def generate(
    schema_file: Path,
    seed: int | None,
    count: int,
    indent: int,
    output: Path | None,
    optional_probability: float | None,
    max_unique_attempts: int | None,
    unique_attempts_per_item: int | None,
) -> None:
    """Generate random data conforming to SCHEMA_FILE.

    SCHEMA_FILE may be JSON or YAML (.yaml/.yml).
    """
    overrides: dict[str, Any] = {}
    if optional_probability is not None:
        overrides["optional_property_probability"] = optional_probability
    if max_unique_attempts is not None:
        overrides["max_unique_attempts"] = max_unique_attempts
    if unique_attempts_per_item is not None:
        overrides["unique_attempts_per_item"] = unique_attempts_per_item

    try:
        config = GeneratorSettings(**overrides)
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    generator = Generator(seed=seed, config=config)
    try:
        node = load_schema(schema_file, config)
        documents = [generator.generate(node) for _ in range(count)]
    except SchemagenError as e:
        raise click.ClickException(str(e)) from e

    result = documents[0] if count == 1 else documents
    text = json.dumps(result, indent=indent or None, ensure_ascii=False)

    if output is None:
        click.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        click.echo(f"Wrote {count} document(s) to {output}", err=True)

    logger.info("cli.generated", schema=str(schema_file), count=count, seed=seed)
