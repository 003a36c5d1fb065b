"""Schema node model and decoder."""

from .parser import parse_schema
from .types import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    NumberNode,
    ObjectNode,
    SchemaNode,
    StringNode,
    UnknownNode,
)

__all__ = [
    "parse_schema",
    "SchemaNode",
    "IntegerNode",
    "NumberNode",
    "StringNode",
    "BooleanNode",
    "ArrayNode",
    "ObjectNode",
    "UnknownNode",
]
