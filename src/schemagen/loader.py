"""Load schema documents from disk.

JSON is the primary format; files ending in ``.yaml`` or ``.yml`` are
read with PyYAML. ``generate_from_file`` is the forgiving entry point:
it logs failures and returns None instead of raising.
"""

import json
from pathlib import Path
from typing import Any

import structlog
import yaml

from schemagen.config import GeneratorSettings
from schemagen.exceptions import SchemagenError, SchemaLoadError
from schemagen.generator import Generator
from schemagen.schema import SchemaNode, parse_schema

logger = structlog.get_logger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def read_schema_document(path: Path | str) -> Any:
    """Read and parse a schema file without decoding it.

    Args:
        path: Path to a JSON or YAML file

    Returns:
        Parsed document (usually a dict)

    Raises:
        SchemaLoadError: If the file cannot be read or parsed
    """
    schema_path = Path(path).expanduser().resolve()
    try:
        text = schema_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise SchemaLoadError("schema file not found", schema_path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaLoadError(f"cannot read schema file ({e})", schema_path) from e

    if schema_path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise SchemaLoadError(f"invalid YAML ({e})", schema_path) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(
            f"invalid JSON at line {e.lineno} column {e.colno} ({e.msg})",
            schema_path,
        ) from e


def load_schema(
    path: Path | str, config: GeneratorSettings | None = None
) -> SchemaNode:
    """Read a schema file and decode it into typed nodes.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed
        SchemaError: If the document is not a valid schema
    """
    document = read_schema_document(path)
    node = parse_schema(document, config)
    logger.debug("schema.loaded", path=str(path), kind=node.kind)
    return node


def generate_from_file(
    path: Path | str, generator: Generator | None = None
) -> Any | None:
    """Load a schema file and generate one value from it.

    Any schemagen failure is logged and reported as None.

    Args:
        path: Path to a JSON or YAML schema file
        generator: Generator to use (a fresh unseeded one by default)

    Returns:
        Generated value, or None if loading or generation failed
    """
    generator = generator or Generator()
    try:
        node = load_schema(path, generator.config)
    except SchemagenError as e:
        logger.error("schema.load_failed", path=str(path), error=str(e))
        return None

    try:
        return generator.generate(node)
    except SchemagenError as e:
        logger.error("generation.failed", path=str(path), error=str(e))
        return None
