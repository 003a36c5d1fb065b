"""schemagen - synthetic data from declarative schemas."""

__version__ = "0.1.0"

from schemagen.exceptions import (  # noqa: E402
    ConstraintError,
    SchemaError,
    SchemagenError,
    SchemaLoadError,
)
from schemagen.generator import Generator, generate  # noqa: E402
from schemagen.loader import generate_from_file, load_schema  # noqa: E402
from schemagen.schema import parse_schema  # noqa: E402

__all__ = [
    "__version__",
    "Generator",
    "generate",
    "parse_schema",
    "load_schema",
    "generate_from_file",
    "SchemagenError",
    "SchemaError",
    "ConstraintError",
    "SchemaLoadError",
]
