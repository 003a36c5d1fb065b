"""Typed schema node model.

Each schema kind is a frozen dataclass. Any node may carry an ``enum``
which overrides kind-specific generation. Bounds are stored fully
resolved: the parser fills in defaults so the generator never has to.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass(frozen=True)
class SchemaNode:
    """Base class for all schema nodes."""

    kind: ClassVar[str] = "unknown"

    enum: tuple[Any, ...] | None = None


@dataclass(frozen=True)
class IntegerNode(SchemaNode):
    """Whole number in the closed interval [minimum, maximum]."""

    kind: ClassVar[str] = "integer"

    minimum: int = 0
    maximum: int = 0


@dataclass(frozen=True)
class NumberNode(SchemaNode):
    """Real number in the half-open interval [minimum, maximum)."""

    kind: ClassVar[str] = "number"

    minimum: float = 0.0
    maximum: float = 0.0


@dataclass(frozen=True)
class StringNode(SchemaNode):
    """Alphanumeric string with a length in [min_length, max_length]."""

    kind: ClassVar[str] = "string"

    min_length: int = 0
    max_length: int = 0


@dataclass(frozen=True)
class BooleanNode(SchemaNode):
    kind: ClassVar[str] = "boolean"


@dataclass(frozen=True)
class UnknownNode(SchemaNode):
    """Node whose type is missing or unsupported. Generates ``None``."""

    kind: ClassVar[str] = "unknown"

    type_name: str | None = None


@dataclass(frozen=True)
class ArrayNode(SchemaNode):
    """List of values all described by ``items``."""

    kind: ClassVar[str] = "array"

    items: SchemaNode = field(default_factory=UnknownNode)
    min_items: int = 0
    max_items: int = 0
    unique_items: bool = False


@dataclass(frozen=True)
class ObjectNode(SchemaNode):
    """Mapping of declared property names to child nodes.

    ``required`` may name keys that are not in ``properties``; those are
    never generated.
    """

    kind: ClassVar[str] = "object"

    properties: dict[str, SchemaNode] = field(default_factory=dict)
    required: frozenset[str] = frozenset()

    def is_required(self, name: str) -> bool:
        return name in self.required
